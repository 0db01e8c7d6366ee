from lispy.reader.ast import AstNode, count_nodes
from lispy.reader.parser import lex, parse, TokenStream
from lispy.reader.translate import read
