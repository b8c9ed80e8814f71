pytest_plugins = [
    'tests.fixtures.values',
]
