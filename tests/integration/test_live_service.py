"""
Integration tests against a live VMware as a Service endpoint.

These tests only read. They run when VMWARE_CREDENTIALS_FILE names a
credentials file for an account with VMware as a Service access:

    VMWARE_CREDENTIALS_FILE=./vmware-credentials.env pytest -m integration
"""

import os

import pytest

from vmwaas.core.context import Context
from vmwaas.exceptions import NotFoundError
from vmwaas.sdk.models import DirectorSiteCollection, DirectorSiteRegionCollection
from vmwaas.sdk.options import (
    GetDirectorSiteOptions,
    ListDirectorSiteRegionsOptions,
    ListDirectorSitesOptions,
)
from vmwaas.sdk.service import VmwareV1

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.environ.get("VMWARE_CREDENTIALS_FILE"),
        reason="VMWARE_CREDENTIALS_FILE is not set",
    ),
]


@pytest.fixture(scope="module")
def live_service():
    service = VmwareV1.from_config()
    service.enable_retries()
    yield service
    service.close()


class TestLiveService:
    """Read-only calls against the configured account."""

    def test_list_regions(self, live_service):
        regions, response = live_service.list_director_site_regions(
            ListDirectorSiteRegionsOptions(), ctx=Context.with_timeout(60)
        )

        assert response.status_code == 200
        assert isinstance(regions, DirectorSiteRegionCollection)
        assert regions.director_site_regions

    def test_list_director_sites(self, live_service):
        sites, response = live_service.list_director_sites(
            ListDirectorSitesOptions().set_headers({"X-Test": "integration"})
        )

        assert response.status_code == 200
        assert isinstance(sites, DirectorSiteCollection)

    def test_get_unknown_site(self, live_service):
        """An unknown site ID is reported as NOT_FOUND."""
        with pytest.raises(NotFoundError) as exc_info:
            live_service.get_director_site(GetDirectorSiteOptions("00000000-0000-0000-0000-000000000000"))

        assert exc_info.value.status_code == 404
