"""skelgen -- generate new Go service projects from a parameterized template.

Answers to the project options are collected interactively or read from a
YAML file, the embedded template tree is rendered into a new directory, files
of disabled extensions are pruned and git plus the Go module are initialised.

Usage::

    skelgen new                      # answer the questions interactively
    skelgen new -c values.yml -o ./  # read answers from a file
"""

__version__ = "0.1.0"
