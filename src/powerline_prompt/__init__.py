"""
Powerline-style bash/zsh prompt renderer

``powerline-prompt`` prints a prompt string made of colored segments joined by
arrow-shaped separators, in the style of the Powerline vim plugin.  It is meant
to be called from bash's ``PROMPT_COMMAND`` or zsh's ``precmd`` hook.

Features:

- Shows the active `virtualenv <https://virtualenv.pypa.io>`_ or `Conda
  <https://conda.io>`_ environment
- Breaks the current directory into breadcrumbs, eliding the middle of deep
  paths
- Shows the branch & cleanliness of the current Git repository, or the number
  of changed files in a Subversion working copy
- Shows whether you are root and whether the last command failed
- Supports both Bash and zsh, with either 256-color or 8-color codes
- Can optionally output just the repository status
"""

__version__ = "0.4.0"
__license__ = "MIT"
