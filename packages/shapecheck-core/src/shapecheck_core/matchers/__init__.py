from .response_matcher import ResponseMatcher
from .type_matcher import DeclaredTypeMatcher, TypeMatcher, assert_conforms, resolve_type

__all__ = ["DeclaredTypeMatcher", "ResponseMatcher", "TypeMatcher", "assert_conforms", "resolve_type"]
