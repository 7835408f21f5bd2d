#!/usr/bin/env python
"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs
"""

"""
Demonstration of the VMware as a Service SDK.

This script shows how to:
1. Build a client from VMWARE_* environment variables
2. Browse regions and host profiles
3. List director sites under a deadline
4. Resize a virtual data center with a merge patch
5. Handle API errors

Run with credentials in the environment, e.g.:

    VMWARE_APIKEY=... python examples/vmwaas_demo.py
"""

import os

from vmwaas import VmwareV1
from vmwaas.core.context import Context
from vmwaas.exceptions import NotFoundError, RequestCancelledError, VmwareError
from vmwaas.logging_config import setup_logging
from vmwaas.sdk.models import VDCPatch
from vmwaas.sdk.options import (
    GetDirectorSiteOptions,
    ListDirectorSiteHostProfilesOptions,
    ListDirectorSiteRegionsOptions,
    ListDirectorSitesOptions,
    UpdateVdcOptions,
)


def main():
    """Run SDK demonstration."""
    setup_logging(level="WARNING", json_format=False)

    print("=" * 60)
    print("VMware as a Service SDK Demonstration")
    print("=" * 60)

    # 1. Build the client
    print("\n1. Building client from the environment...")
    service = VmwareV1.from_config()
    service.enable_retries(max_retries=3, max_retry_interval=10)
    print(f"   ✓ Using {service.get_service_url()}")

    with service:
        # 2. Catalog
        print("\n2. Browsing the catalog...")
        regions, _ = service.list_director_site_regions(ListDirectorSiteRegionsOptions())
        for region in regions.director_site_regions:
            print(f"   - {region.name}: {len(region.data_centers)} data centers")

        profiles, _ = service.list_director_site_host_profiles(ListDirectorSiteHostProfilesOptions())
        for profile in profiles.director_site_host_profiles:
            print(f"   - {profile.id}: {profile.cpu} cores, {profile.ram} GB")

        # 3. Sites, bounded by a deadline
        print("\n3. Listing director sites (10 second deadline)...")
        try:
            sites, response = service.list_director_sites(
                ListDirectorSitesOptions(), ctx=Context.with_timeout(10)
            )
        except RequestCancelledError as e:
            print(f"   ✗ {e.message}")
            return
        print(f"   ✓ {len(sites.director_sites)} sites (status {response.get_status_code()})")
        for site in sites.director_sites:
            print(f"   - {site.id} {site.name} [{site.status}]")

        # 4. Merge patch
        vdc_id = os.environ.get("VMWARE_DEMO_VDC_ID")
        if vdc_id:
            print(f"\n4. Resizing VDC {vdc_id} to 4 vCPU...")
            vdc, _ = service.update_vdc(UpdateVdcOptions(vdc_id, VDCPatch(cpu=4)))
            print(f"   ✓ VDC {vdc.name} is {vdc.status}")
        else:
            print("\n4. Skipping VDC resize (set VMWARE_DEMO_VDC_ID to try it)")

        # 5. Errors
        print("\n5. Requesting a site that does not exist...")
        try:
            service.get_director_site(GetDirectorSiteOptions("does-not-exist"))
        except NotFoundError as e:
            print(f"   ✓ {e.kind.value}: {e.message} (transaction {e.transaction_id})")
        except VmwareError as e:
            print(f"   ✗ Unexpected {e.kind.value}: {e.message}")

    print("\n" + "=" * 60)
    print("Demonstration complete")
    print("=" * 60)


if __name__ == "__main__":
    main()
