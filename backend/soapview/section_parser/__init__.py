"""SOAP section parser package."""

from .factory import get_convention_matchers, parse_soap_note
from .base import BaseConventionMatcher, HeaderConventionMatcher
