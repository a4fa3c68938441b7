"""Core framework components for progdb.

Modules:
  program: Immutable program descriptors, locations and versions.
  discovery: Explicit-path and PATH based location resolution.
  version: Version probing and output selectors.
  registry: Immutable name -> program configuration.
  invoker: Blocking execution of configured programs.
  builtin: Programs known out of the box.
  config_loader: Override flags, YAML override files, textual form.
"""

from .registry import ProgramConfiguration  # noqa: F401
