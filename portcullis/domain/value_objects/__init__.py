"""Domain value objects."""

from portcullis.domain.value_objects.core import Submission

__all__ = ["Submission"]
