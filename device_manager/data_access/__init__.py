# This file makes the 'data_access' directory a Python package.
# It also makes it easier to import repositories from other modules.

from .device_repository import DeviceRepository, device_repo
