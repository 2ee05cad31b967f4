#!/usr/bin/env python3

import pytest

from graphql_to_pydantic.cli_utils import reconstruct_command_line
from graphql_to_pydantic.graphql_to_pydantic import graphql_to_pydantic


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        """Test command reconstruction without active Click context (fallback)"""
        result = reconstruct_command_line(graphql_to_pydantic)
        assert result == "graphql_to_pydantic"


if __name__ == "__main__":
    pytest.main([__file__])
