"""Vehicle property MCP tools.

Caller mistakes (unknown name, unavailable property) come back as
``{"error": ..., "error_type": ...}`` so the agent can correct itself.
Anything else is logged here and reported as an opaque internal error.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from cartool.core.errors import CarToolError, is_caller_error
from cartool.core.logging import LogContext, get_logger
from cartool.mcp import _app
from cartool.property.repository import CarPropertyRepository

mcp = _app.mcp
logger = get_logger(__name__)

INTERNAL_ERROR = {"error": "Internal error"}
NOT_ATTACHED_ERROR = {"error": "Vehicle property service is not attached"}


def _invoke(tool: str, call: Callable[[CarPropertyRepository], Any], property_name: str | None = None) -> Any:
    fields = {"tool": tool} if property_name is None else {"tool": tool, "property_name": property_name}
    with LogContext(**fields):
        ctx = _app._get_context()
        if not ctx.initialized:
            logger.error("tool_without_service")
            return dict(NOT_ATTACHED_ERROR)
        try:
            return call(ctx.repository)
        except CarToolError as e:
            if is_caller_error(e):
                logger.info("tool_rejected", error_type=type(e).__name__, reason=e.message)
                return {"error": e.message, "error_type": type(e).__name__}
            logger.error("tool_failed", **e.to_dict())
            return dict(INTERNAL_ERROR)
        except Exception:
            logger.exception("tool_failed")
            return dict(INTERNAL_ERROR)


def _get(tool: str, property_name: str, area_id: int, read: Callable[..., Any]) -> dict[str, Any]:
    return _invoke(tool, lambda repo: {"value": read(repo)(property_name, area_id)}, property_name)


def _set(tool: str, property_name: str, area_id: int, value: Any, write: Callable[..., Any]) -> dict[str, Any]:
    return _invoke(tool, lambda repo: {"result": write(repo)(property_name, area_id, value)}, property_name)


@mcp.tool()
async def get_property_list() -> str | dict[str, Any]:
    """A list of supported vehicle properties, formatted as a JSON string.

    Each vehicle function is described as a vehicle property. Interpret the
    JSON fields strictly according to this table:

    | Field Path                             | Type             | Description |
    | -------------------------------------- | ---------------- | ----------- |
    | `propertyName`                         | String           | Unique machine-readable property name (uppercase with underscores). Pass it as `property_name` to the getters and setters. |
    | `propertyDescription`                  | String           | What the property represents. |
    | `access`                               | Integer (Enum)   | Access permissions: `1` = Read-only, `2` = Write-only, `3` = Read & Write. |
    | `dataType`                             | Integer (Enum)   | Value type: `1`=STRING, `2`=BOOLEAN, `3`=INT32, `4`=INT32_VEC (array of 32-bit integers), `5`=LONG, `6`=LONG_VEC (array of 64-bit integers), `7`=FLOAT, `8`=FLOAT_VEC (array of floats), `9`=BYTES. Use the matching getter/setter: string, boolean, int, int_array, long, long_array, float, float_array. |
    | `changeMode`                           | Integer (Enum)   | How value updates are reported: `0` (Static) never changes, `1` (On Change) reported when the value changes, `2` (Continuous) changes continuously and is reported at a regular interval. |
    | `areaType`                             | Integer (Enum)   | Physical area the property applies to: `0` = Global (the entire vehicle), `2` = Window, `3` = Seat, `4` = Door, `5` = Mirror, `6` = Wheel. |
    | `areaIdProfiles`                       | Array of Objects | How the property applies to the different areas of the vehicle. |
    | `areaIdProfiles[].areaId`              | Integer          | Bitmask of a distinct location (a seat, a window, ...). Pass it as `area_id` to read or write just that zone. |
    | `areaIdProfiles[].areaIdDescription`   | String           | The exact area or areas covered by the `areaId`. |
    | `areaIdProfiles[].minValue`            | Number           | Minimum allowed value in this area. Empty means no minimum is enforced. |
    | `areaIdProfiles[].maxValue`            | Number           | Maximum allowed value in this area. Empty means no maximum is enforced. |
    | `areaIdProfiles[].supportedEnumValues` | Array            | Enumeration values supported in this area. An empty array means the property is not an enum. |

    Returns:
        JSON array of property profiles, or a dictionary with 'error'
    """
    return _invoke("get_property_list", lambda repo: repo.get_property_list())


@mcp.tool()
async def get_string_property(property_name: str, area_id: int) -> dict[str, Any]:
    """Get the current value of a string vehicle property.

    Args:
        property_name: Name of the property to read (from get_property_list)
        area_id: Area id of the property to read

    Returns:
        {'value': str}; an empty string when the property has no value
    """
    return _get("get_string_property", property_name, area_id, lambda r: r.get_string_property)


@mcp.tool()
async def set_string_property(property_name: str, area_id: int, value: str) -> dict[str, Any]:
    """Set the value of a string vehicle property.

    Args:
        property_name: Name of the property to modify
        area_id: Area id of the property to modify
        value: New string value

    Returns:
        {'result': 'success'}
    """
    return _set("set_string_property", property_name, area_id, value, lambda r: r.set_string_property)


@mcp.tool()
async def get_boolean_property(property_name: str, area_id: int) -> dict[str, Any]:
    """Get the current value of a boolean vehicle property.

    Args:
        property_name: Name of the property to read
        area_id: Area id of the property to read

    Returns:
        {'value': bool}
    """
    return _get("get_boolean_property", property_name, area_id, lambda r: r.get_boolean_property)


@mcp.tool()
async def set_boolean_property(property_name: str, area_id: int, value: bool) -> dict[str, Any]:
    """Set the value of a boolean vehicle property.

    Args:
        property_name: Name of the property to modify
        area_id: Area id of the property to modify
        value: New boolean value

    Returns:
        {'result': 'success'}
    """
    return _set("set_boolean_property", property_name, area_id, value, lambda r: r.set_boolean_property)


@mcp.tool()
async def get_int_property(property_name: str, area_id: int) -> dict[str, Any]:
    """Get the current value of a 32-bit integer vehicle property.

    Args:
        property_name: Name of the property to read
        area_id: Area id of the property to read

    Returns:
        {'value': int}
    """
    return _get("get_int_property", property_name, area_id, lambda r: r.get_int_property)


@mcp.tool()
async def set_int_property(property_name: str, area_id: int, value: int) -> dict[str, Any]:
    """Set the value of a 32-bit integer vehicle property.

    Args:
        property_name: Name of the property to modify
        area_id: Area id of the property to modify
        value: New integer value

    Returns:
        {'result': 'success'}
    """
    return _set("set_int_property", property_name, area_id, value, lambda r: r.set_int_property)


@mcp.tool()
async def get_int_array_property(property_name: str, area_id: int) -> dict[str, Any]:
    """Get the current value of a 32-bit integer array vehicle property.

    Args:
        property_name: Name of the property to read
        area_id: Area id of the property to read

    Returns:
        {'value': list[int]}
    """
    return _get("get_int_array_property", property_name, area_id, lambda r: r.get_int_array_property)


@mcp.tool()
async def set_int_array_property(property_name: str, area_id: int, value: list[int]) -> dict[str, Any]:
    """Set the value of a 32-bit integer array vehicle property.

    Args:
        property_name: Name of the property to modify
        area_id: Area id of the property to modify
        value: New integer array

    Returns:
        {'result': 'success'}
    """
    return _set("set_int_array_property", property_name, area_id, value, lambda r: r.set_int_array_property)


@mcp.tool()
async def get_long_property(property_name: str, area_id: int) -> dict[str, Any]:
    """Get the current value of a 64-bit integer vehicle property.

    Args:
        property_name: Name of the property to read
        area_id: Area id of the property to read

    Returns:
        {'value': int}; 0 when the property has no value
    """
    return _get("get_long_property", property_name, area_id, lambda r: r.get_long_property)


@mcp.tool()
async def set_long_property(property_name: str, area_id: int, value: int) -> dict[str, Any]:
    """Set the value of a 64-bit integer vehicle property.

    Args:
        property_name: Name of the property to modify
        area_id: Area id of the property to modify
        value: New 64-bit integer value

    Returns:
        {'result': 'success'}
    """
    return _set("set_long_property", property_name, area_id, value, lambda r: r.set_long_property)


@mcp.tool()
async def get_long_array_property(property_name: str, area_id: int) -> dict[str, Any]:
    """Get the current value of a 64-bit integer array vehicle property.

    Args:
        property_name: Name of the property to read
        area_id: Area id of the property to read

    Returns:
        {'value': list[int]}; an empty list when the property has no value
    """
    return _get("get_long_array_property", property_name, area_id, lambda r: r.get_long_array_property)


@mcp.tool()
async def set_long_array_property(property_name: str, area_id: int, value: list[int]) -> dict[str, Any]:
    """Set the value of a 64-bit integer array vehicle property.

    Args:
        property_name: Name of the property to modify
        area_id: Area id of the property to modify
        value: New 64-bit integer array

    Returns:
        {'result': 'success'}
    """
    return _set("set_long_array_property", property_name, area_id, value, lambda r: r.set_long_array_property)


@mcp.tool()
async def get_float_property(property_name: str, area_id: int) -> dict[str, Any]:
    """Get the current value of a float vehicle property.

    Args:
        property_name: Name of the property to read
        area_id: Area id of the property to read

    Returns:
        {'value': float}
    """
    return _get("get_float_property", property_name, area_id, lambda r: r.get_float_property)


@mcp.tool()
async def set_float_property(property_name: str, area_id: int, value: float) -> dict[str, Any]:
    """Set the value of a float vehicle property.

    Args:
        property_name: Name of the property to modify
        area_id: Area id of the property to modify
        value: New float value

    Returns:
        {'result': 'success'}
    """
    return _set("set_float_property", property_name, area_id, value, lambda r: r.set_float_property)


@mcp.tool()
async def get_float_array_property(property_name: str, area_id: int) -> dict[str, Any]:
    """Get the current value of a float array vehicle property.

    Args:
        property_name: Name of the property to read
        area_id: Area id of the property to read

    Returns:
        {'value': list[float]}; an empty list when the property has no value
    """
    return _get("get_float_array_property", property_name, area_id, lambda r: r.get_float_array_property)


@mcp.tool()
async def set_float_array_property(property_name: str, area_id: int, value: list[float]) -> dict[str, Any]:
    """Set the value of a float array vehicle property.

    Args:
        property_name: Name of the property to modify
        area_id: Area id of the property to modify
        value: New float array

    Returns:
        {'result': 'success'}
    """
    return _set("set_float_array_property", property_name, area_id, value, lambda r: r.set_float_array_property)
