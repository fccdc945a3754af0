"""Concrete converters, one text transformation each."""

from text_converter.converters.case import LowerCaseText, ReverseText, UpperCaseText
from text_converter.converters.whitespace import WhitespaceNormalizer

__all__ = [
    "LowerCaseText",
    "ReverseText",
    "UpperCaseText",
    "WhitespaceNormalizer",
]
