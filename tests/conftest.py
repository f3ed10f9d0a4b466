pytest_plugins = ["search_export.testing.fixtures"]
