"""Compatibility checks between selected components.

Sockets, form factors and PSU wattage are read from normalized
specifications first and from the component name when a spec is missing.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping

from ..catalog.specifications import normalize_specifications
from ..common.models import Component
from .models import SEVERITY_ERROR, SEVERITY_WARNING, CompatibilityIssue
from .power import extract_wattage

logger = logging.getLogger(__name__)

PSU_HEADROOM = 1.3

_AMD_BOARD_MARKERS = ("am4", "am5", "amd", "b550", "x570", "b650", "x670")
_INTEL_BOARD_MARKERS = ("intel", "z690", "z790", "b660", "b760", "lga1700")

BOARD_SIZES = ("mini-itx", "micro-atx", "e-atx", "atx")
_MB_FITS_STANDARD = ("mini-itx", "micro-atx", "atx")
_MB_FITS_MICRO = ("mini-itx", "micro-atx")

_NUMBER_RE = re.compile(r"(\d+)")
_SEPARATOR_RE = re.compile(r"[\s_]+")


def _hyphenate(value: str) -> str:
    return _SEPARATOR_RE.sub("-", value.lower().strip())


def normalize_board_size(size: str) -> str:
    """Map a motherboard form factor string onto mini-itx/micro-atx/e-atx/atx."""
    size = _hyphenate(size)
    if "mini-itx" in size or "mitx" in size or size == "itx":
        return "mini-itx"
    if "micro-atx" in size or "matx" in size or "m-atx" in size:
        return "micro-atx"
    if "e-atx" in size or "eatx" in size or "extended" in size:
        return "e-atx"
    if "atx" in size:
        return "atx"
    return size


def check_form_factor_compatibility(case_form_factor: str, motherboard_form_factor: str) -> bool:
    """Whether a motherboard fits in a case. Unknown sizes are assumed to fit."""
    if not case_form_factor or not motherboard_form_factor:
        return True

    case_size = _hyphenate(case_form_factor)
    board = normalize_board_size(motherboard_form_factor)
    if board not in BOARD_SIZES:
        return True

    if "full-tower" in case_size or "e-atx" in case_size or "extended" in case_size:
        return True
    if "mid-tower" in case_size:
        return board in _MB_FITS_STANDARD
    if "micro-atx" in case_size or "matx" in case_size:
        return board in _MB_FITS_MICRO
    if "mini-itx" in case_size or "mitx" in case_size:
        return board == "mini-itx"
    if "atx" in case_size:
        return board in _MB_FITS_STANDARD
    return True


def psu_wattage(psu: Component) -> int:
    """Rated PSU output from its specs or name, 0 when unknown."""
    specs = normalize_specifications(psu.specifications)
    rated = specs.get("wattage", "")
    match = _NUMBER_RE.search(rated)
    if match:
        return int(match.group(1))
    return extract_wattage(psu.name)


def _form_factor(component: Component) -> str:
    specs = normalize_specifications(component.specifications)
    return specs.get("form_factor") or component.name


def _socket(component: Component) -> str:
    return normalize_specifications(component.specifications).get("socket", "").strip()


def _check_cpu_motherboard(cpu: Component, board: Component) -> list[CompatibilityIssue]:
    cpu_socket, board_socket = _socket(cpu), _socket(board)
    if cpu_socket and board_socket:
        if cpu_socket.lower() != board_socket.lower():
            return [CompatibilityIssue(
                code="cpu_socket_mismatch",
                message=f"CPU socket {cpu_socket} does not match motherboard socket {board_socket}",
            )]
        return []

    cpu_name, board_name = cpu.name.lower(), board.name.lower()
    is_amd = "ryzen" in cpu_name or "amd" in cpu_name
    is_intel = "intel" in cpu_name or "core i" in cpu_name

    if is_amd and not any(m in board_name for m in _AMD_BOARD_MARKERS):
        return [CompatibilityIssue(
            code="cpu_platform_mismatch",
            message="AMD CPUs require an AMD compatible motherboard",
            severity=SEVERITY_WARNING,
        )]
    if is_intel and not any(m in board_name for m in _INTEL_BOARD_MARKERS):
        return [CompatibilityIssue(
            code="cpu_platform_mismatch",
            message="Intel CPUs require an Intel compatible motherboard",
            severity=SEVERITY_WARNING,
        )]
    return []


def _check_psu(psu: Component, total_watts: int) -> list[CompatibilityIssue]:
    rated = psu_wattage(psu)
    if rated <= 0:
        return []

    recommended = math.ceil(round(total_watts * PSU_HEADROOM, 6))
    if rated < total_watts:
        return [CompatibilityIssue(
            code="psu_insufficient",
            message=f"PSU wattage ({rated}W) is below the estimated draw ({total_watts}W)",
        )]
    if rated < recommended:
        return [CompatibilityIssue(
            code="psu_low_headroom",
            message=f"PSU wattage ({rated}W) leaves little headroom, {recommended}W recommended",
            severity=SEVERITY_WARNING,
        )]
    return []


def find_compatibility_issues(
    selected: Mapping[str, Component],
    total_watts: int,
) -> list[CompatibilityIssue]:
    """Check a build keyed by category (cpu, motherboard, case, psu, ...).

    Args:
        selected: Selected components keyed by category id.
        total_watts: Estimated build draw; PSU checks are skipped at 0.

    Returns:
        Issues in check order: CPU/motherboard, case/motherboard, PSU.
    """
    issues: list[CompatibilityIssue] = []
    cpu = selected.get("cpu")
    board = selected.get("motherboard")
    case = selected.get("case")
    psu = selected.get("psu")

    if cpu and board:
        issues.extend(_check_cpu_motherboard(cpu, board))

    if case and board:
        case_ff, board_ff = _form_factor(case), _form_factor(board)
        if not check_form_factor_compatibility(case_ff, board_ff):
            issues.append(CompatibilityIssue(
                code="form_factor_mismatch",
                message=f"{normalize_board_size(board_ff)} motherboard does not fit in {case.name}",
            ))

    if psu and total_watts > 0:
        issues.extend(_check_psu(psu, total_watts))

    for issue in issues:
        logger.debug("Compatibility %s: %s", issue.severity, issue.message)
    return issues
