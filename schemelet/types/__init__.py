"""Value variants shared by the reader (as forms) and the evaluator (as results)."""

from schemelet.types.atom import Atom
from schemelet.types.boolean import Boolean, TRUE, FALSE
from schemelet.types.dotted_pair import DottedPair
from schemelet.types.integer import Integer
from schemelet.types.lisp_list import LispList, EMPTY_LIST
from schemelet.types.string import String

__all__ = [
    "Atom",
    "Boolean",
    "DottedPair",
    "EMPTY_LIST",
    "FALSE",
    "Integer",
    "LispList",
    "String",
    "TRUE",
]
