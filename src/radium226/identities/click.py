from click import ParamType, Context, Parameter
from typing import Any

from .types import KeyValue, IdentityName, InvalidIdentityNameError
from .locator import validate_identity_name



class IdentityNameParamType(ParamType):
    name = "identity_name"

    def convert(self, value: Any, param: Parameter | None, ctx: Context | None) -> IdentityName:
        try:
            assert isinstance(value, str), f"Expected a string value, got {type(value).__name__}"
            return validate_identity_name(value)
        except (AssertionError, InvalidIdentityNameError) as e:
            self.fail(
                f"{e}",
                param,
                ctx,
            )


IDENTITY_NAME = IdentityNameParamType()



class KeyValueParamType(ParamType):
    name = "tuple"

    def convert(self, value: Any, param: Parameter | None, ctx: Context | None) -> KeyValue:
        try:
            assert isinstance(value, str), f"Expected a string value, got {type(value).__name__}"
            [key, value] = value.split("=", 1)
            return KeyValue(key.strip(), value.strip())
        except Exception as e:
            self.fail(
                f"{e}",
                param,
                ctx,
            )


KEY_VALUE = KeyValueParamType()


def to_dict(ctx: Context, param: Parameter, value: Any) -> dict[str, str]:
    result: dict[str, str] = {}
    if value is None:
        return result
    for key_value in value:
        result[key_value.key] = key_value.value
    return result
