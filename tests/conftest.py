pytest_plugins = [
    "tests.fixtures.settings_fixtures",
    "tests.fixtures.app_client",
]
