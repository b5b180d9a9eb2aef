from . import device_schemas, response_schemas
