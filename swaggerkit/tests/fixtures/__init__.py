"""Test fixtures for swaggerkit tests.

This module provides sample models and API surfaces shared by the tests.
"""

from datetime import datetime
from enum import Enum

from swaggerkit.schema import Maybe, Model, optional_key, set_of


class Status(str, Enum):
    AVAILABLE = 'available'
    PENDING = 'pending'
    SOLD = 'sold'


Tag = Model({'id': int, 'name': str}, name='Tag')

Category = Model({'id': int, 'name': str}, name='Category')

Pet = Model(
    {
        'id': int,
        'name': str,
        'status': Status,
        optional_key('category'): Category,
        optional_key('tags'): [Tag],
        'owner': {
            'name': str,
            optional_key('address'): {'street': str, 'city': str},
        },
    },
    name='Pet',
    description='A pet in the store',
)

NewPet = Model({'name': str, optional_key('tag'): str}, name='NewPet')

Order = Model(
    {
        'id': int,
        'petId': int,
        optional_key('shipDate'): datetime,
        optional_key('complete'): bool,
    },
    name='Order',
)

Error = Model({'code': int, 'message': str}, name='Error')

# Minimal surface with a single route
MINIMAL_API = {
    'paths': {
        '/health': {
            'get': {
                'summary': 'Health check',
                'responses': {200: {'description': 'OK', 'schema': {'status': str}}},
            }
        }
    }
}

# Petstore-like surface with models in bodies and responses
PETSTORE_API = {
    'info': {'title': 'Petstore API', 'version': '1.0.0'},
    'basePath': '/api',
    'paths': {
        '/pets': {
            'get': {
                'summary': 'List all pets',
                'tags': ['pets'],
                'operationId': 'listPets',
                'parameters': {
                    'query': {optional_key('limit'): int, optional_key('status'): Status}
                },
                'responses': {
                    200: {'description': 'All pets', 'schema': [Pet]},
                    'default': {'description': 'Unexpected error', 'schema': Error},
                },
            },
            'post': {
                'summary': 'Create a pet',
                'operationId': 'createPet',
                'parameters': {'body': NewPet},
                'responses': {201: {'description': 'Created', 'schema': Pet}},
            },
        },
        '/pets/:id': {
            'get': {
                'operationId': 'getPet',
                'parameters': {'path': {'id': int}},
                'responses': {
                    200: {'description': 'The pet', 'schema': Pet},
                    404: {'description': 'Not found'},
                },
            },
            'put': {
                'operationId': 'replacePets',
                'parameters': {
                    'path': {'id': int},
                    'header': {optional_key('X-Request-Id'): str},
                    'body': set_of(Pet),
                },
                'responses': {204: {'description': 'Replaced'}},
            },
        },
        '/store/orders': {
            'post': {
                'operationId': 'placeOrders',
                'parameters': {'body': [Order]},
                'responses': {
                    200: {
                        'description': 'Receipt',
                        'schema': {
                            'orders': [Order],
                            'total': float,
                            'note': Maybe(str),
                        },
                    }
                },
            }
        },
    },
}
