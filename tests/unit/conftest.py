# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from mock_sites import make_httpx_client


@pytest.fixture
def client_factory():
    """InspectionEngine client factory: one mocked httpx client per worker."""

    def factory(policy):
        return make_httpx_client(policy)

    return factory
