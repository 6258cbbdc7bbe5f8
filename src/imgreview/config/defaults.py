"""Starter .imgreview.toml template."""

DEFAULT_TOML = """\
# imgreview configuration

[git]
executable = "git"
# timeout = 30            # seconds; unset = wait for git indefinitely

[history]
limit = 50                # commits listed by `imgreview commits`

[output]
format = "terminal"       # terminal | json

[logging]
level = "WARNING"         # DEBUG | INFO | WARNING | ERROR
format = "console"        # console | json
"""
