"""
fflint-action: download, cache and run the fflint file-format linter in CI.
"""

from fflint_action.config import ActionConfig, load_config
from fflint_action.installer import FflintInstaller, install
from fflint_action.runner import RunOutcome, RunResult, run, run_tool

__all__ = [
    "ActionConfig",
    "load_config",
    "FflintInstaller",
    "install",
    "RunOutcome",
    "RunResult",
    "run",
    "run_tool",
]
