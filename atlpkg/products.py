"""Per-product packaging constants."""

from __future__ import annotations

from dataclasses import dataclass

from atlpkg.core.config import PackageConfig, default_config

__all__ = ["Product", "CONFLUENCE", "JIRA_SERVICEDESK", "DEFAULT_TARGET"]

DEFAULT_TARGET = "dist"
FEED_BASE = "https://my.atlassian.com/download/feeds/current"


@dataclass(frozen=True, slots=True)
class Product:
    """Static facts about one Atlassian product.

    Attributes:
        key: Short identifier used in feed URLs.
        package_name: Debian package name.
        architecture: Debian architecture of the package.
        source_prefix: Top-level directory prefix inside the upstream
            archive; the full name is ``<source_prefix>-<upstream version>``.
        install_prefix: Where the product is installed on the target host.
        target_dir: Default output directory for built packages.
    """

    key: str
    package_name: str
    architecture: str
    source_prefix: str
    install_prefix: str
    description: str
    maintainer: str = "Atlassian packaging <packaging@localhost>"
    target_dir: str = DEFAULT_TARGET

    @property
    def feed_url(self) -> str:
        return f"{FEED_BASE}/{self.key}.json"

    def source_dir(self, upstream_version: str) -> str:
        return f"{self.source_prefix}-{upstream_version}"

    def default_config(self) -> PackageConfig:
        return default_config(
            self.package_name,
            self.architecture,
            maintainer=self.maintainer,
            description=self.description,
        )


CONFLUENCE = Product(
    key="confluence",
    package_name="atlassian-confluence",
    architecture="all",
    source_prefix="atlassian-confluence",
    install_prefix="/opt/atlassian-confluence",
    description="Atlassian Confluence team collaboration software",
)

JIRA_SERVICEDESK = Product(
    key="servicedesk",
    package_name="atlassian-servicedesk",
    architecture="all",
    source_prefix="atlassian-jira-servicedesk",
    install_prefix="/opt/atlassian-servicedesk",
    description="Atlassian Jira Service Desk",
)
