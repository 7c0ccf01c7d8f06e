"""
Infrastructure layer package.

Contains outbound integrations. Currently a thin JSON client over
httpx for calling other services.
"""
