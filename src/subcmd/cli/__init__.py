"""CLI layer — process boundary, exit codes and the example command.

This package is the outermost layer.  It may import from ``core`` and
the top-level modules, but nothing else imports from ``cli``.
"""
