"""Vehicle property catalog and typed access façade.

::

    from cartool.property import CarPropertyRepository

    repository = CarPropertyRepository(service)
    catalog_json = repository.get_property_list()
    speed = repository.get_float_property("PERF_VEHICLE_SPEED", 0)
"""

from cartool.property.constants import RESULT_SUCCESS, ValueKind
from cartool.property.descriptors import AreaIdConfig, RawPropertyDescriptor
from cartool.property.models import AreaIdProfile, CarPropertyProfile
from cartool.property.repository import CarPropertyRepository

__all__ = [
    "RESULT_SUCCESS",
    "AreaIdConfig",
    "AreaIdProfile",
    "CarPropertyProfile",
    "CarPropertyRepository",
    "RawPropertyDescriptor",
    "ValueKind",
]
