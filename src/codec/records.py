"""Decoding and encoding of Location documents.

Documents are JSON objects whose keys are the camelCase field names of the
records. Decoding is all-or-nothing: a document either yields a complete
record or raises a ``DecodeError`` naming the record and field at fault.
"""

import json
import logging
import types
from pathlib import Path
from typing import Any, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError

from src.core.config import MAX_PART_OF_DEPTH_LIMIT, CodecConfig
from src.core.errors import (
    CyclicReferenceError,
    DecodeError,
    MalformedDocumentError,
    MissingFieldError,
    ReferenceDepthError,
    TypeMismatchError,
    UnrecognizedCodeError,
)
from src.models.coding import CONFIG_CONTEXT_KEY, UnknownCode
from src.models.location import Location

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)

PART_OF_KEY = "partOf"


def _nested_model(annotation: Any) -> type[BaseModel] | None:
    """Find the record type inside a field annotation (Optional, tuple, ...)."""
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    if get_origin(annotation) in (Union, types.UnionType, tuple):
        for arg in get_args(annotation):
            nested = _nested_model(arg)
            if nested is not None:
                return nested
    return None


def _field_owner(
    model_cls: type[BaseModel], loc: tuple[Any, ...]
) -> tuple[str, str, str]:
    """Resolve an error location to (record name, field name, wire path)."""
    owner = model_cls
    path = ".".join(str(part) for part in loc)
    keys = [part for part in loc if isinstance(part, str)]

    for key in keys[:-1]:
        fields = {
            (info.alias or name): info for name, info in owner.model_fields.items()
        }
        info = fields.get(key) or owner.model_fields.get(key)
        if info is None:
            break
        nested = _nested_model(info.annotation)
        if nested is None:
            break
        owner = nested

    field = keys[-1] if keys else path
    return owner.__name__, field, path


def _translate_validation_error(
    model_cls: type[BaseModel], exc: ValidationError
) -> DecodeError:
    """Map the first pydantic error onto the decode error taxonomy."""
    errors = exc.errors()
    first = errors[0]
    record, field, path = _field_owner(model_cls, tuple(first["loc"]))
    error_type = first["type"]

    if error_type == "missing":
        return MissingFieldError(
            f"{record} is missing required field '{field}' (at {path})",
            record=record,
            field=field,
            path=path,
            errors=errors,
        )

    if error_type == "recursion_loop":
        return ReferenceDepthError(
            f"{record}.{field}: nesting is too deep to decode (at {path})",
            max_depth=MAX_PART_OF_DEPTH_LIMIT,
            path=path,
        )

    if error_type == "unrecognized_code":
        ctx = first.get("ctx", {})
        return UnrecognizedCodeError(
            f"{record}.{field}: {first['msg']} (at {path})",
            code_system=ctx.get("code_system", ""),
            value=ctx.get("value", ""),
            record=record,
            field=field,
            path=path,
            errors=errors,
        )

    return TypeMismatchError(
        f"{record}.{field}: {first['msg']} (at {path})",
        record=record,
        field=field,
        path=path,
        errors=errors,
    )


def decode_record(
    model_cls: type[R], data: Any, config: CodecConfig | None = None
) -> R:
    """Decode a wire mapping into a record.

    Args:
        model_cls: Record type to decode.
        data: Parsed document (a dict of wire field names to values).
        config: Codec configuration for coded fields (defaults to the
            environment).

    Returns:
        Fully populated record instance.

    Raises:
        MalformedDocumentError: If ``data`` is not a mapping.
        MissingFieldError: If a required field is absent.
        TypeMismatchError: If a field value has the wrong shape.
        UnrecognizedCodeError: If a closed code list gets an unknown code.
    """
    if not isinstance(data, dict):
        raise MalformedDocumentError(
            f"Expected a JSON object for {model_cls.__name__}, "
            f"got {type(data).__name__}",
            record=model_cls.__name__,
        )
    try:
        return model_cls.model_validate(data, context={CONFIG_CONTEXT_KEY: config})
    except ValidationError as e:
        error = _translate_validation_error(model_cls, e)
        logger.debug("Decode of %s failed: %s", model_cls.__name__, error)
        raise error from e


def encode_record(record: BaseModel) -> dict[str, Any]:
    """Encode a record as a wire mapping.

    Every declared field is emitted under its wire name in declaration order,
    including empty sequences and ``None`` for absent optional fields.
    """
    return record.model_dump(mode="json", by_alias=True)


def _part_of(document: dict[str, Any]) -> Any:
    if PART_OF_KEY in document:
        return document[PART_OF_KEY]
    return document.get("part_of")


def check_part_of_chain(data: dict[str, Any], max_depth: int) -> int:
    """Walk the raw partOf chain of a Location document.

    Args:
        data: Raw Location document.
        max_depth: Maximum number of nested partOf documents, capped at
            ``MAX_PART_OF_DEPTH_LIMIT``.

    Returns:
        Depth of the chain (0 when there is no partOf).

    Raises:
        CyclicReferenceError: If the chain refers back to a document in it.
        ReferenceDepthError: If the chain is deeper than ``max_depth``.
    """
    max_depth = min(max_depth, MAX_PART_OF_DEPTH_LIMIT)
    seen = {id(data)}
    depth = 0
    path = PART_OF_KEY
    current = _part_of(data)

    while isinstance(current, dict):
        if id(current) in seen:
            raise CyclicReferenceError(
                f"Location.partOf refers back to a location already in the chain "
                f"(at {path})",
                record="Location",
                field=PART_OF_KEY,
                path=path,
            )
        depth += 1
        if depth > max_depth:
            raise ReferenceDepthError(
                f"Location.partOf nests more than {max_depth} locations (at {path})",
                max_depth=max_depth,
                path=path,
            )
        seen.add(id(current))
        path = f"{path}.{PART_OF_KEY}"
        current = _part_of(current)

    return depth


def decode_location(data: Any, config: CodecConfig | None = None) -> Location:
    """Decode a Location document, including its whole partOf chain.

    Args:
        data: Parsed Location document.
        config: Codec configuration (defaults to the environment).

    Returns:
        Decoded Location.

    Raises:
        DecodeError: On any decode failure (see ``decode_record``), or a
            cyclic or too deep partOf chain.
    """
    if config is None:
        config = CodecConfig.from_env()
    if isinstance(data, dict):
        depth = check_part_of_chain(data, config.max_part_of_depth)
        logger.debug("Decoding Location with partOf depth %d", depth)
    return decode_record(Location, data, config=config)


def encode_location(location: Location) -> dict[str, Any]:
    """Encode a Location, including its partOf chain, as a wire mapping."""
    return encode_record(location)


def loads_location(text: str | bytes, config: CodecConfig | None = None) -> Location:
    """Decode a Location from JSON text.

    Raises:
        MalformedDocumentError: If the text is not valid JSON or is nested
            too deeply to parse.
        DecodeError: On any other decode failure.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDocumentError(
            f"Invalid JSON: {e}", record="Location"
        ) from e
    except RecursionError as e:
        raise MalformedDocumentError(
            "Invalid JSON: document is nested too deeply", record="Location"
        ) from e
    return decode_location(data, config=config)


def dumps_location(location: Location, indent: int | None = None) -> str:
    """Encode a Location as JSON text."""
    return json.dumps(encode_location(location), indent=indent, ensure_ascii=False)


def load_location_file(
    file_path: Path | str, config: CodecConfig | None = None
) -> Location:
    """Read and decode a Location JSON document from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
        DecodeError: If the document cannot be decoded.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Location document not found: {path}")
    logger.info("Decoding Location document %s", path)
    return loads_location(path.read_text(encoding="utf-8"), config=config)


def find_unknown_codes(record: BaseModel) -> list[tuple[str, UnknownCode]]:
    """Find every code in a record that fell outside its code list.

    Args:
        record: Decoded record to inspect.

    Returns:
        (wire field path, unknown code) pairs in field order; nested records
        and partOf chains are included.
    """
    found: list[tuple[str, UnknownCode]] = []
    _collect_unknown(record, "", found)
    return found


def _collect_unknown(
    value: Any, path: str, found: list[tuple[str, UnknownCode]]
) -> None:
    if isinstance(value, UnknownCode):
        found.append((path, value))
    elif isinstance(value, BaseModel):
        for name, info in type(value).model_fields.items():
            key = info.alias or name
            child_path = f"{path}.{key}" if path else key
            _collect_unknown(getattr(value, name), child_path, found)
    elif isinstance(value, tuple):
        for index, item in enumerate(value):
            _collect_unknown(item, f"{path}.{index}", found)
