"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Command-line interface for VMware as a Service.
"""
