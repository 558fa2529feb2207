"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters
- Application services don't depend on adapters
- Adapters can depend on domain
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import anything beyond the domain models themselves."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("mvg_board.domain.models*")
        .should_not_import("mvg_board.adapters*")
        .should_not_import("mvg_board.application*")
        .should_not_import("mvg_board.domain.contracts*")
        .should_not_import("mvg_board.domain.ports*")
        .may_import("mvg_board.domain.models*")
        .check("mvg_board")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("mvg_board.domain.contracts*")
        .should_not_import("mvg_board.adapters*")
        .should_not_import("mvg_board.application*")
        .may_import("mvg_board.domain*")
        .check("mvg_board")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("mvg_board.domain.ports*")
        .should_not_import("mvg_board.adapters*")
        .should_not_import("mvg_board.application*")
        .may_import("mvg_board.domain*")
        .check("mvg_board")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("mvg_board.application*")
        .should_not_import("mvg_board.adapters*")
        .may_import("mvg_board.domain*")
        .check("mvg_board")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services; main wires them together."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("mvg_board.adapters*")
        .should_not_import("mvg_board.application*")
        .may_import("mvg_board.domain*")
        .may_import("mvg_board.adapters*")
        .check("mvg_board", only_direct_imports=True)
    )
