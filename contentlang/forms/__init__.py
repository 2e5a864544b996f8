# -*- coding: utf-8 -*-
"""
forms

Content language settings form assembly and submission handling.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .builder import ContentLanguageFormBuilder
from .descriptors import (
    FORM_ID,
    BundleRowDescriptor,
    ContainerDescriptor,
    FormDescriptor,
    ToggleDescriptor,
    VisibilityState,
)
from .state import FormStateParser
from .submission import ContentLanguageSubmissionHandler, coerce_flag

__all__ = [
    "BundleRowDescriptor",
    "ContainerDescriptor",
    "ContentLanguageFormBuilder",
    "ContentLanguageSubmissionHandler",
    "FORM_ID",
    "FormDescriptor",
    "FormStateParser",
    "ToggleDescriptor",
    "VisibilityState",
    "coerce_flag",
]


# The End
