"""Coded values: closed code tables with a fallback for unknown codes.

Code lists from external code systems (FHIR value sets, HL7 v3 role codes)
keep growing after a release. An ``ExtensibleEnum`` declares the codes known
today and decodes anything else into an ``UnknownCode`` that carries the
original text, so a document always re-encodes exactly as it was received.
A ``ClosedEnum`` is the strict variant: exact matches only.

Model fields use ``Coded[SomeEnum]`` for extensible lists and the enum class
itself for closed lists.
"""

import logging
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, TypeVar, get_args

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from src.core.config import CodecConfig
from src.core.errors import UnrecognizedCodeError

logger = logging.getLogger(__name__)

# Validation context key carrying a CodecConfig into model validation
CONFIG_CONTEXT_KEY = "codec_config"


class UnknownCodeWarning(UserWarning):
    """A code outside a code list's known values was decoded."""


class CodeEnum(str, Enum):
    """Ordered table of (name, canonical code) pairs from a code system."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def match(cls, raw: str) -> "CodeEnum | None":
        """Find the member whose code equals ``raw`` ignoring case.

        Members are compared in declaration order and the first match wins.
        """
        wanted = raw.upper()
        for member in cls:
            if member.value.upper() == wanted:
                return member
        return None

    @classmethod
    def codes(cls) -> list[str]:
        """Return the canonical codes in declaration order."""
        return [member.value for member in cls]


@dataclass(frozen=True)
class UnknownCode:
    """A code that is not one of its code list's known values.

    Attributes:
        code_system: The enum the code was decoded for.
        value: The code exactly as it appeared on the wire.
    """

    code_system: type["ExtensibleEnum"]
    value: str

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"UnknownCode({self.code_system.__name__}, {self.value!r})"


def _report_unknown(
    enum_cls: type["ExtensibleEnum"], raw: str, config: CodecConfig | None = None
) -> None:
    """Log an unrecognized code, and warn when configured to.

    The environment is read only when no configuration is passed in.
    """
    logger.warning(
        "Unrecognized %s code %r; keeping it as an unknown code",
        enum_cls.__name__,
        raw,
    )
    if config is None:
        try:
            config = CodecConfig.from_env()
        except ValueError as e:
            logger.warning("Ignoring invalid codec configuration: %s", e)
            return
    if config.warn_unknown_codes:
        warnings.warn(
            f"Unrecognized {enum_cls.__name__} code: {raw!r}",
            UnknownCodeWarning,
            stacklevel=3,
        )


class ExtensibleEnum(CodeEnum):
    """Code list that preserves codes it does not know."""

    @classmethod
    def decode(
        cls, raw: str, config: CodecConfig | None = None
    ) -> "ExtensibleEnum | UnknownCode":
        """Decode a wire string.

        Never fails for a string input: codes outside the table become an
        ``UnknownCode`` holding ``raw`` unchanged. ``config`` controls the
        unknown-code warning (defaults to the environment).

        Raises:
            TypeError: If ``raw`` is not a string.
        """
        if not isinstance(raw, str):
            raise TypeError(
                f"{cls.__name__} code must be a string, got {type(raw).__name__}"
            )
        member = cls.match(raw)
        if member is not None:
            return member
        _report_unknown(cls, raw, config)
        return UnknownCode(cls, raw)


class ClosedEnum(CodeEnum):
    """Code list that only accepts its own codes, matched exactly."""

    @classmethod
    def decode(cls, raw: str) -> "ClosedEnum":
        """Decode a wire string that must equal one of the codes exactly.

        Raises:
            TypeError: If ``raw`` is not a string.
            UnrecognizedCodeError: If ``raw`` is not one of the codes.
        """
        if not isinstance(raw, str):
            raise TypeError(
                f"{cls.__name__} code must be a string, got {type(raw).__name__}"
            )
        for member in cls:
            if member.value == raw:
                return member
        raise UnrecognizedCodeError(
            f"Unrecognized {cls.__name__} code: {raw!r}",
            code_system=cls.__name__,
            value=raw,
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def validate(value: Any) -> ClosedEnum:
            if not isinstance(value, str):
                raise _code_type_error(cls, value)
            try:
                return cls.decode(value)
            except UnrecognizedCodeError as e:
                raise PydanticCustomError(
                    "unrecognized_code",
                    "Unrecognized {code_system} code: {value!r}",
                    {"code_system": e.code_system, "value": e.value},
                ) from None

        return core_schema.no_info_plain_validator_function(
            validate, serialization=_code_serializer()
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "enum": cls.codes()}


E = TypeVar("E", bound=ExtensibleEnum)


def decode_code(
    enum_cls: type[E], raw: str, config: CodecConfig | None = None
) -> E | UnknownCode:
    """Decode ``raw`` against an extensible code list."""
    return enum_cls.decode(raw, config)  # type: ignore[return-value]


def encode_code(value: CodeEnum | UnknownCode) -> str:
    """Return the wire string for a coded value.

    Known members encode to their canonical code exactly as declared; unknown
    codes encode to the text they were decoded from.
    """
    return value.value


def is_unknown(value: Any) -> bool:
    """Check whether a coded value fell outside its code list."""
    return isinstance(value, UnknownCode)


def _code_type_error(enum_cls: type[CodeEnum], value: Any) -> PydanticCustomError:
    return PydanticCustomError(
        "code_type",
        "{code_system} code must be a string, got {type_name}",
        {"code_system": enum_cls.__name__, "type_name": type(value).__name__},
    )


def _code_serializer() -> core_schema.SerSchema:
    return core_schema.plain_serializer_function_ser_schema(
        encode_code, return_schema=core_schema.str_schema()
    )


def _extensible_enum_in(source_type: Any) -> type[ExtensibleEnum]:
    for arg in get_args(source_type):
        if isinstance(arg, type) and issubclass(arg, ExtensibleEnum):
            return arg
    raise TypeError(f"Coded[...] needs an ExtensibleEnum, got {source_type!r}")


def _config_from(info: core_schema.ValidationInfo) -> CodecConfig | None:
    """Codec configuration passed as validation context, if any."""
    context = info.context
    if isinstance(context, dict):
        config = context.get(CONFIG_CONTEXT_KEY)
        if isinstance(config, CodecConfig):
            return config
    return None


class _CodedSchema:
    """Pydantic schema for ``Coded[...]`` fields."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        enum_cls = _extensible_enum_in(source_type)

        def validate(
            value: Any, info: core_schema.ValidationInfo
        ) -> ExtensibleEnum | UnknownCode:
            if isinstance(value, UnknownCode):
                if value.code_system is not enum_cls:
                    raise PydanticCustomError(
                        "code_system_mismatch",
                        "Expected a {expected} code, got an unknown "
                        "{actual} code",
                        {
                            "expected": enum_cls.__name__,
                            "actual": value.code_system.__name__,
                        },
                    )
                return value
            if not isinstance(value, str):
                raise _code_type_error(enum_cls, value)
            return enum_cls.decode(value, _config_from(info))

        return core_schema.with_info_plain_validator_function(
            validate, serialization=_code_serializer()
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string"}


# Field type for an extensible code list: a known member or an UnknownCode.
Coded = Annotated[E | UnknownCode, _CodedSchema]
