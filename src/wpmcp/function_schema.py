"""Tool descriptions: argument models, advertised schemas and invocation."""

import inspect
import logging
from collections.abc import Callable, Iterable
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from typing_extensions import TypedDict

from wpmcp.docstring import DocstringInfo, extract_docs_from_string
from wpmcp.errors import ToolArgumentError
from wpmcp.fields import FieldSpec, build_args_model
from wpmcp.formatting import failure, success
from wpmcp.models import ToolResponse
from wpmcp.serialization import create_model_from_field_definitions

logger = logging.getLogger(__name__)


class FunctionSchema(TypedDict):
    name: str
    description: str
    parameters: dict[str, Any]


class JSONSchema(TypedDict):
    type: str
    function: FunctionSchema


def function_schema_from_args(args_json_schema: dict, name: str, doc: str) -> JSONSchema:
    """Generate an OpenAI-compatible tool schema from an argument JSON schema."""
    return {
        "type": "function",
        "function": {
            "name": name,
            "description": doc.strip(),
            "parameters": args_json_schema,
        },
    }


class FunctionDescription:
    """A named tool: its handler, argument model and advertised schema.

    Arguments come either from an explicit list of ``FieldSpec`` (for handlers
    taking ``**params``) or from the handler's signature and docstring.
    """

    function: Callable
    function_schema: JSONSchema
    name: str
    description: str
    tags: list[str]
    docstring_info: DocstringInfo

    args_model: type[BaseModel]
    args_json_schema: dict

    def __init__(
        self,
        func: Callable,
        name: str | None = None,
        fields: Iterable[FieldSpec] | None = None,
        doc_override: str | None = None,
        description: str = "",
        tags: list[str] | None = None,
    ):
        self.function = func
        self.name = name or func.__name__
        self.tags = tags or []
        self.is_async = inspect.iscoroutinefunction(func)

        doc_text = inspect.cleandoc(doc_override or func.__doc__ or f"Function {self.name}")
        self.docstring_info = extract_docs_from_string(doc_text)
        self.description = description or self.docstring_info.description or doc_text.strip()

        model_name = "".join(part.title() for part in self.name.split("_")) + "Args"
        if fields is not None:
            self.args_model = build_args_model(model_name, fields)
        else:
            self.args_model = self._create_args_model(func, model_name)

        self.args_json_schema = self.args_model.model_json_schema()
        self.function_schema = function_schema_from_args(
            self.args_json_schema, self.name, self.description
        )

    def _create_args_model(self, func: Callable, model_name: str) -> type[BaseModel]:
        """Create a Pydantic model from the handler's signature.

        Args:
            func: Handler to analyze
            model_name: Name of the generated model

        Returns:
            Dynamically created Pydantic model class
        """
        field_definitions = {}

        for param_name, param in inspect.signature(func).parameters.items():
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue

            # Use the raw annotation to preserve Annotated constraints
            param_type = param.annotation if param.annotation is not inspect.Parameter.empty else Any
            param_description = self.docstring_info.parameters.get(param_name, "")

            if param.default is not inspect.Parameter.empty:
                field_definitions[param_name] = (
                    param_type,
                    Field(default=param.default, description=param_description),
                )
            else:
                field_definitions[param_name] = (
                    param_type,
                    Field(description=param_description),
                )

        return create_model_from_field_definitions(model_name, field_definitions)

    def validate_and_parse_args(self, json_args: dict | None) -> dict[str, Any]:
        """Validate raw tool arguments.

        Absent and null values are dropped so they never reach a request.

        Raises:
            ToolArgumentError: If the arguments violate the schema.
        """
        try:
            parsed = self.args_model.model_validate(json_args or {})
        except ValidationError as e:
            raise ToolArgumentError.from_validation_error(self.name, e) from e
        return {k: v for k, v in parsed.model_dump(mode="json").items() if v is not None}

    async def call_async(self, *args, **kwargs) -> Any:
        if self.is_async:
            return await self.function(*args, **kwargs)
        return self.function(*args, **kwargs)

    async def invoke(self, arguments: dict | None) -> ToolResponse:
        """Validate, run the handler and return exactly one envelope."""
        try:
            parsed_args = self.validate_and_parse_args(arguments)
            result = await self.call_async(**parsed_args)
        except Exception as e:
            logger.warning(f"Tool {self.name} failed: {e}")
            return failure(e)

        if isinstance(result, ToolResponse):
            return result
        return success(result)
