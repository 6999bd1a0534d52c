"""Platform constants for vehicle property configurations.

Codes mirror the vehicle HAL / car service values, so a raw descriptor's
integers can be compared against them directly and copied verbatim into a
profile. Area flags are single bits within their area type; the order of the
``AREA_DECODER_MAP`` entries is the order labels appear in decoded
descriptions.
"""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag


class VehiclePropertyAccess(IntEnum):
    NONE = 0
    READ = 1
    WRITE = 2
    READ_WRITE = 3


class VehiclePropertyChangeMode(IntEnum):
    STATIC = 0
    ON_CHANGE = 1
    CONTINUOUS = 2


class VehicleAreaType(IntEnum):
    GLOBAL = 0
    WINDOW = 2
    SEAT = 3
    DOOR = 4
    MIRROR = 5
    WHEEL = 6
    VENDOR = 7


class VehiclePropertyType(IntEnum):
    """Integer ``dataType`` codes published in the catalog."""

    STRING = 1
    BOOLEAN = 2
    INT32 = 3
    INT32_VEC = 4
    INT64 = 5
    INT64_VEC = 6
    FLOAT = 7
    FLOAT_VEC = 8
    # Reserved: no ValueKind maps here.
    BYTES = 9


class ValueKind(str, Enum):
    """The eight value kinds cartool reads and writes.

    The values double as the type tags a vehicle property service reports
    in ``RawPropertyDescriptor.value_kind``.
    """

    STRING = "string"
    BOOLEAN = "boolean"
    INT32 = "int32"
    INT32_ARRAY = "int32[]"
    INT64 = "int64"
    INT64_ARRAY = "int64[]"
    FLOAT = "float"
    FLOAT_ARRAY = "float[]"


class VehicleAreaWindow(IntFlag):
    WINDOW_FRONT_WINDSHIELD = 0x00000001
    WINDOW_REAR_WINDSHIELD = 0x00000002
    WINDOW_ROW_1_LEFT = 0x00000010
    WINDOW_ROW_1_RIGHT = 0x00000040
    WINDOW_ROW_2_LEFT = 0x00000100
    WINDOW_ROW_2_RIGHT = 0x00000400
    WINDOW_ROW_3_LEFT = 0x00001000
    WINDOW_ROW_3_RIGHT = 0x00004000
    WINDOW_ROOF_TOP_1 = 0x00010000
    WINDOW_ROOF_TOP_2 = 0x00020000


class VehicleAreaSeat(IntFlag):
    SEAT_ROW_1_LEFT = 0x0001
    SEAT_ROW_1_CENTER = 0x0002
    SEAT_ROW_1_RIGHT = 0x0004
    SEAT_ROW_2_LEFT = 0x0010
    SEAT_ROW_2_CENTER = 0x0020
    SEAT_ROW_2_RIGHT = 0x0040
    SEAT_ROW_3_LEFT = 0x0100
    SEAT_ROW_3_CENTER = 0x0200
    SEAT_ROW_3_RIGHT = 0x0400


class VehicleAreaDoor(IntFlag):
    DOOR_ROW_1_LEFT = 0x00000001
    DOOR_ROW_1_RIGHT = 0x00000004
    DOOR_ROW_2_LEFT = 0x00000010
    DOOR_ROW_2_RIGHT = 0x00000040
    DOOR_ROW_3_LEFT = 0x00000100
    DOOR_ROW_3_RIGHT = 0x00000400
    DOOR_HOOD = 0x10000000
    DOOR_REAR = 0x20000000


class VehicleAreaMirror(IntFlag):
    MIRROR_DRIVER_LEFT = 0x00000001
    MIRROR_DRIVER_RIGHT = 0x00000002
    MIRROR_DRIVER_CENTER = 0x00000004


class VehicleAreaWheel(IntFlag):
    WHEEL_LEFT_FRONT = 0x1
    WHEEL_RIGHT_FRONT = 0x2
    WHEEL_RIGHT_REAR = 0x4
    WHEEL_LEFT_REAR = 0x8


SUPPORTED_ACCESS_VALUES = frozenset({
    VehiclePropertyAccess.READ,
    VehiclePropertyAccess.WRITE,
    VehiclePropertyAccess.READ_WRITE,
})

SUPPORTED_AREA_TYPES = frozenset({
    VehicleAreaType.GLOBAL,
    VehicleAreaType.WINDOW,
    VehicleAreaType.SEAT,
    VehicleAreaType.DOOR,
    VehicleAreaType.MIRROR,
    VehicleAreaType.WHEEL,
})

SUPPORTED_CHANGE_MODES = frozenset({
    VehiclePropertyChangeMode.STATIC,
    VehiclePropertyChangeMode.ON_CHANGE,
    VehiclePropertyChangeMode.CONTINUOUS,
})

SUPPORTED_DATA_TYPE_MAP: dict[ValueKind, VehiclePropertyType] = {
    ValueKind.BOOLEAN: VehiclePropertyType.BOOLEAN,
    ValueKind.FLOAT: VehiclePropertyType.FLOAT,
    ValueKind.INT32: VehiclePropertyType.INT32,
    ValueKind.INT64: VehiclePropertyType.INT64,
    ValueKind.FLOAT_ARRAY: VehiclePropertyType.FLOAT_VEC,
    ValueKind.INT32_ARRAY: VehiclePropertyType.INT32_VEC,
    ValueKind.INT64_ARRAY: VehiclePropertyType.INT64_VEC,
    ValueKind.STRING: VehiclePropertyType.STRING,
}

AREA_ALL_WINDOW = (
    VehicleAreaWindow.WINDOW_FRONT_WINDSHIELD
    | VehicleAreaWindow.WINDOW_REAR_WINDSHIELD
    | VehicleAreaWindow.WINDOW_ROW_1_LEFT
    | VehicleAreaWindow.WINDOW_ROW_1_RIGHT
    | VehicleAreaWindow.WINDOW_ROW_2_LEFT
    | VehicleAreaWindow.WINDOW_ROW_2_RIGHT
    | VehicleAreaWindow.WINDOW_ROW_3_LEFT
    | VehicleAreaWindow.WINDOW_ROW_3_RIGHT
    | VehicleAreaWindow.WINDOW_ROOF_TOP_1
    | VehicleAreaWindow.WINDOW_ROOF_TOP_2
)

AREA_ALL_SEAT = (
    VehicleAreaSeat.SEAT_ROW_1_LEFT
    | VehicleAreaSeat.SEAT_ROW_1_CENTER
    | VehicleAreaSeat.SEAT_ROW_1_RIGHT
    | VehicleAreaSeat.SEAT_ROW_2_LEFT
    | VehicleAreaSeat.SEAT_ROW_2_CENTER
    | VehicleAreaSeat.SEAT_ROW_2_RIGHT
    | VehicleAreaSeat.SEAT_ROW_3_LEFT
    | VehicleAreaSeat.SEAT_ROW_3_CENTER
    | VehicleAreaSeat.SEAT_ROW_3_RIGHT
)

AREA_ALL_DOOR = (
    VehicleAreaDoor.DOOR_ROW_1_LEFT
    | VehicleAreaDoor.DOOR_ROW_1_RIGHT
    | VehicleAreaDoor.DOOR_ROW_2_LEFT
    | VehicleAreaDoor.DOOR_ROW_2_RIGHT
    | VehicleAreaDoor.DOOR_ROW_3_LEFT
    | VehicleAreaDoor.DOOR_ROW_3_RIGHT
    | VehicleAreaDoor.DOOR_HOOD
    | VehicleAreaDoor.DOOR_REAR
)

AREA_ALL_MIRROR = (
    VehicleAreaMirror.MIRROR_DRIVER_LEFT
    | VehicleAreaMirror.MIRROR_DRIVER_RIGHT
    | VehicleAreaMirror.MIRROR_DRIVER_CENTER
)

AREA_ALL_WHEEL = (
    VehicleAreaWheel.WHEEL_LEFT_FRONT
    | VehicleAreaWheel.WHEEL_RIGHT_FRONT
    | VehicleAreaWheel.WHEEL_LEFT_REAR
    | VehicleAreaWheel.WHEEL_RIGHT_REAR
)

# Every zoned area type; GLOBAL is handled separately.
AREA_ID_MASKS: dict[int, int] = {
    VehicleAreaType.WINDOW: int(AREA_ALL_WINDOW),
    VehicleAreaType.SEAT: int(AREA_ALL_SEAT),
    VehicleAreaType.DOOR: int(AREA_ALL_DOOR),
    VehicleAreaType.MIRROR: int(AREA_ALL_MIRROR),
    VehicleAreaType.WHEEL: int(AREA_ALL_WHEEL),
}

GLOBAL_AREA_DESCRIPTION = "Use this 'areaId' value to apply the property to the entire vehicle."

AREA_SPECIFIC_DESCRIPTION_TEMPLATE = "This 'areaId' value targets the vehicle property for %s."

AREA_DECODER_MAP: dict[int, tuple[tuple[int, str], ...]] = {
    VehicleAreaType.WINDOW: (
        (VehicleAreaWindow.WINDOW_FRONT_WINDSHIELD, "front windshield"),
        (VehicleAreaWindow.WINDOW_REAR_WINDSHIELD, "rear windshield"),
        (VehicleAreaWindow.WINDOW_ROW_1_LEFT, "first row left window"),
        (VehicleAreaWindow.WINDOW_ROW_1_RIGHT, "first row right window"),
        (VehicleAreaWindow.WINDOW_ROW_2_LEFT, "second row left window"),
        (VehicleAreaWindow.WINDOW_ROW_2_RIGHT, "second row right window"),
        (VehicleAreaWindow.WINDOW_ROW_3_LEFT, "third row left window"),
        (VehicleAreaWindow.WINDOW_ROW_3_RIGHT, "third row right window"),
        (VehicleAreaWindow.WINDOW_ROOF_TOP_1, "first top roof window"),
        (VehicleAreaWindow.WINDOW_ROOF_TOP_2, "second top roof window"),
    ),
    VehicleAreaType.SEAT: (
        (VehicleAreaSeat.SEAT_ROW_1_LEFT, "first row left seat"),
        (VehicleAreaSeat.SEAT_ROW_1_CENTER, "first row center seat"),
        (VehicleAreaSeat.SEAT_ROW_1_RIGHT, "first row right seat"),
        (VehicleAreaSeat.SEAT_ROW_2_LEFT, "second row left seat"),
        (VehicleAreaSeat.SEAT_ROW_2_CENTER, "second row center seat"),
        (VehicleAreaSeat.SEAT_ROW_2_RIGHT, "second row right seat"),
        (VehicleAreaSeat.SEAT_ROW_3_LEFT, "third row left seat"),
        (VehicleAreaSeat.SEAT_ROW_3_CENTER, "third row center seat"),
        (VehicleAreaSeat.SEAT_ROW_3_RIGHT, "third row right seat"),
    ),
    VehicleAreaType.DOOR: (
        (VehicleAreaDoor.DOOR_ROW_1_LEFT, "first row left door"),
        (VehicleAreaDoor.DOOR_ROW_1_RIGHT, "first row right door"),
        (VehicleAreaDoor.DOOR_ROW_2_LEFT, "second row left door"),
        (VehicleAreaDoor.DOOR_ROW_2_RIGHT, "second row right door"),
        (VehicleAreaDoor.DOOR_ROW_3_LEFT, "third row left door"),
        (VehicleAreaDoor.DOOR_ROW_3_RIGHT, "third row right door"),
        (VehicleAreaDoor.DOOR_HOOD, "hood"),
        (VehicleAreaDoor.DOOR_REAR, "trunk lid"),
    ),
    VehicleAreaType.MIRROR: (
        (VehicleAreaMirror.MIRROR_DRIVER_LEFT, "left side mirror"),
        (VehicleAreaMirror.MIRROR_DRIVER_RIGHT, "right side mirror"),
        (VehicleAreaMirror.MIRROR_DRIVER_CENTER, "rearview mirror"),
    ),
    VehicleAreaType.WHEEL: (
        (VehicleAreaWheel.WHEEL_LEFT_FRONT, "left front wheel"),
        (VehicleAreaWheel.WHEEL_RIGHT_FRONT, "right front wheel"),
        (VehicleAreaWheel.WHEEL_LEFT_REAR, "left rear wheel"),
        (VehicleAreaWheel.WHEEL_RIGHT_REAR, "right rear wheel"),
    ),
}

RESULT_SUCCESS = "success"
