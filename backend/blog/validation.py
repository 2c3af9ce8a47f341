"""
Blog API - Editor Validation
=============================

What:  Declared rules for EditorCategory and the helper that flattens
       field-level failures into plain messages.
How:   validate_editor() returns failures in the same shape Pydantic and
       FastAPI use for their errors() lists ({"loc", "msg", "type"}), so
       extract_error_messages() works on both.

Rules:
    name  required                  "O nome é obrigatório."
    name  3 to 40 characters        "Esse campo deve conter entre 3 e 40 caracteres."
    slug  required                  "O slug é obrigatório."
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from blog.schemas.category import EditorCategory

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 40

NAME_REQUIRED_MESSAGE = "O nome é obrigatório."
NAME_LENGTH_MESSAGE = (
    f"Esse campo deve conter entre {NAME_MIN_LENGTH} e {NAME_MAX_LENGTH} caracteres."
)
SLUG_REQUIRED_MESSAGE = "O slug é obrigatório."


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _failure(field: str, message: str, kind: str) -> Dict[str, Any]:
    return {"loc": ("body", field), "msg": message, "type": kind}


def validate_editor(editor: EditorCategory) -> List[Dict[str, Any]]:
    """
    Evaluate every rule against the editor and collect the failures.

    A required-rule failure skips the other rules of the same field, so each
    field contributes at most one message. Fields are checked in declaration
    order (name, then slug).

    Returns:
        An empty list when the editor is valid.
    """
    failures: List[Dict[str, Any]] = []

    if _is_blank(editor.name):
        failures.append(_failure("name", NAME_REQUIRED_MESSAGE, "missing"))
    elif not NAME_MIN_LENGTH <= len(editor.name) <= NAME_MAX_LENGTH:
        failures.append(_failure("name", NAME_LENGTH_MESSAGE, "string_length"))

    if _is_blank(editor.slug):
        failures.append(_failure("slug", SLUG_REQUIRED_MESSAGE, "missing"))

    return failures


def extract_error_messages(failures: Iterable[Mapping[str, Any]]) -> List[str]:
    """Flatten field-level failures into their messages, keeping order."""
    return [str(failure["msg"]) for failure in failures]
