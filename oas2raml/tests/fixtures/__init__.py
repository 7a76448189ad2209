"""Test fixtures for oas2raml tests.

Sample OpenAPI documents, already decoded, as the converter receives them.
"""

# Minimal OpenAPI 3.0 document
MINIMAL_OPENAPI_DOC = {
    'openapi': '3.0.0',
    'info': {'title': 'Minimal API', 'version': '1.0.0'},
    'paths': {},
}

# The pets document with one templated server and one operation
PETS_DOC = {
    'openapi': '3.0.0',
    'info': {'title': 'Pets API', 'version': '1.0'},
    'servers': [
        {
            'url': 'https://api.example.com/{version}',
            'variables': {
                'version': {'default': 'v1', 'enum': ['v1', 'v2']},
            },
        }
    ],
    'paths': {
        '/pets': {
            'get': {
                'summary': 'List pets',
                'parameters': [
                    {'name': 'limit', 'in': 'query'},
                    {'name': 'X-Token', 'in': 'header'},
                ],
            }
        }
    },
}

PETS_YAML = """\
openapi: "3.0.0"
info: { title: "Pets API", version: "1.0" }
servers: [{ url: "https://api.example.com/{version}",
            variables: { version: { default: "v1", enum: ["v1","v2"] } } }]
paths:
  /pets:
    get:
      summary: "List pets"
      parameters:
        - { name: limit, in: query }
        - { name: X-Token, in: header }
"""

# Petstore-like document touching every supported and many unsupported fields
PETSTORE_DOC = {
    'openapi': '3.0.3',
    'info': {
        'title': 'Petstore API',
        'description': 'A sample Petstore API',
        'termsOfService': 'https://petstore.example.com/terms',
        'contact': {'email': 'api@example.com'},
        'license': {'name': 'MIT'},
        'version': '2.1.0',
    },
    'servers': [
        {
            'url': 'https://{region}.petstore.example.com/api/{basePath}',
            'variables': {
                'region': {
                    'enum': ['eu', 'us'],
                    'default': 'eu',
                    'description': 'Deployment region',
                },
                'basePath': {'default': 'v1'},
            },
        },
        {'url': 'https://staging.petstore.example.com/api/v1'},
    ],
    'paths': {
        '/pets': {
            'summary': 'Pets collection',
            'description': 'Operations on all pets',
            'get': {
                'tags': ['pets'],
                'operationId': 'listPets',
                'parameters': [
                    {
                        'name': 'limit',
                        'in': 'query',
                        'required': False,
                        'schema': {'type': 'integer', 'format': 'int32'},
                    },
                    {'name': 'status', 'in': 'query'},
                    {'name': 'X-Request-Id', 'in': 'header'},
                    {'name': 'session', 'in': 'cookie'},
                ],
                'responses': {'200': {'description': 'A list of pets'}},
            },
            'post': {
                'summary': 'Create a pet',
                'description': 'Adds a pet to the store',
                'operationId': 'createPet',
                'requestBody': {
                    'content': {
                        'application/json': {
                            'schema': {'$ref': '#/components/schemas/Pet'}
                        }
                    }
                },
                'responses': {'201': {'description': 'Pet created'}},
                'security': [{'api_key': []}],
            },
        },
        '/pets/{petId}': {
            'parameters': [{'name': 'petId', 'in': 'path', 'required': True}],
            'get': {
                'summary': 'Get a pet by ID',
                'parameters': [
                    {'name': 'petId', 'in': 'path', 'required': True},
                    {'$ref': '#/components/parameters/Verbose'},
                ],
                'deprecated': True,
                'responses': {'200': {'description': 'A pet'}},
            },
            'delete': {'externalDocs': {'url': 'https://docs.example.com'}},
            'trace': {'summary': 'Trace a pet'},
        },
    },
    'components': {
        'schemas': {'Pet': {'type': 'object'}},
        'parameters': {'Verbose': {'name': 'verbose', 'in': 'query'}},
    },
}
