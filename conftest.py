pytest_plugins = ["esharness.harness.plugin"]
