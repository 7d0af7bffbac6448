pytest_plugins = ["acceptance_actions.pytest_plugin"]
