# tests/utils/__init__.py

from .constants import DEFAULT_TEST_LOG_LEVEL, PROJ_ROOT
from .patch_everywhere import patch_everywhere
from .settings_nodes import (
    make_configuration,
    make_node,
    make_run_settings,
    write_settings_file,
)
from .strip_common_prefix import strip_common_prefix
from .trace import TEST_TRACE, make_test_trace


__all__ = [  # noqa: RUF022
    # constants
    "PROJ_ROOT",
    "DEFAULT_TEST_LOG_LEVEL",
    # patch_everywhere
    "patch_everywhere",
    # settings_nodes
    "make_configuration",
    "make_node",
    "make_run_settings",
    "write_settings_file",
    # strip_common_prefix
    "strip_common_prefix",
    # test_trace
    "TEST_TRACE",
    "make_test_trace",
]
