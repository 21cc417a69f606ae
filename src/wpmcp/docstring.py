"""Docstring parsing using griffe for tool and parameter descriptions."""

import logging

from griffe import Docstring
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class DocstringInfo(BaseModel):
    """Structured docstring information extracted from handler documentation."""

    description: str
    parameters: dict[str, str]


def extract_docs_from_string(docstring_text: str) -> DocstringInfo:
    """Extract the summary and parameter docs from a Google-style docstring.

    Args:
        docstring_text: The docstring text to parse

    Returns:
        DocstringInfo with the description and a name -> text mapping of parameters
    """
    if not docstring_text:
        return DocstringInfo(description="", parameters={})

    parsed = Docstring(docstring_text, lineno=1).parse("google", warnings=False)

    description = ""
    parameters: dict[str, str] = {}

    for section in parsed:
        if section.kind.value == "text" and not description:
            description = section.value
        elif section.kind.value == "parameters":
            for param in section.value:
                parameters[param.name] = param.description

    return DocstringInfo(description=description.strip(), parameters=parameters)
