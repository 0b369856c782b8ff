# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Unit tests for utils.py."""

import logging

import pytest

from stripfont.exceptions import ConfigurationError
from stripfont.utils import logical_asset_name, setup_logging, validate_whitelist


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_default_level(self) -> None:
        """Default level is INFO."""
        logger = setup_logging()

        assert logger.name == "stripfont"
        assert logger.level == logging.INFO

    def test_verbose(self) -> None:
        """verbose=True selects DEBUG."""
        assert setup_logging(verbose=True).level == logging.DEBUG

    def test_quiet_takes_precedence(self) -> None:
        """quiet=True selects ERROR even with verbose."""
        assert setup_logging(verbose=True, quiet=True).level == logging.ERROR

    def test_no_duplicate_handlers(self) -> None:
        """Repeated setup keeps a single handler."""
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1


class TestValidateWhitelist:
    """Tests for validate_whitelist()."""

    def test_none(self) -> None:
        """None means no whitelist."""
        assert validate_whitelist(None) == ()

    def test_list(self) -> None:
        """Lists are normalized to tuples, keeping order."""
        assert validate_whitelist(["b", "a"]) == ("b", "a")

    def test_bare_string_rejected(self) -> None:
        """A bare string is not a list of identifiers."""
        with pytest.raises(ConfigurationError, match="sequence of strings"):
            validate_whitelist("home")

    def test_non_string_entry_rejected(self) -> None:
        """Every entry must be a string."""
        with pytest.raises(ConfigurationError, match="must be strings"):
            validate_whitelist(["home", 3])


class TestLogicalAssetName:
    """Tests for logical_asset_name()."""

    @pytest.mark.parametrize(
        ("file_name", "expected"),
        [
            ("assets/bootstrap-icons-BfDeaU_d.woff2", "bootstrap-icons.woff2"),
            ("assets/bootstrap-icons-Bf-eaU_d.woff", "bootstrap-icons.woff"),
            ("bootstrap-icons.woff2", "bootstrap-icons.woff2"),
            ("assets/index-Ab12Cd34.css", "index.css"),
            ("fonts\\my-icons.woff", "my-icons.woff"),
        ],
    )
    def test_names(self, file_name: str, expected: str) -> None:
        """Directory and content hash are stripped."""
        assert logical_asset_name(file_name) == expected
