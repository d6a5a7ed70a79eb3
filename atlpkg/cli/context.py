"""Per-invocation wiring of product, collaborators and console for each command."""

from __future__ import annotations

from dataclasses import dataclass

from atlpkg.feed.http import HttpClient, RealHttpClient
from atlpkg.output.console import ConsoleProtocol, RichConsole
from atlpkg.packaging.assembler import DebAssembler, PackageAssembler
from atlpkg.products import CONFLUENCE, JIRA_SERVICEDESK, Product


@dataclass(frozen=True, slots=True)
class BuildContext:
    product: Product
    assembler: PackageAssembler
    console: ConsoleProtocol


@dataclass(frozen=True, slots=True)
class QueryContext:
    product: Product
    http: HttpClient
    console: ConsoleProtocol


def build_context(product: Product = CONFLUENCE) -> BuildContext:
    return BuildContext(
        product=product,
        assembler=DebAssembler(install_prefix=product.install_prefix),
        console=RichConsole(),
    )


def query_context(product: Product = JIRA_SERVICEDESK) -> QueryContext:
    return QueryContext(product=product, http=RealHttpClient(), console=RichConsole())
