pytest_plugins = ["opath._pytest_plugin"]
