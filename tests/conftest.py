"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from sui_graph.config import PaginationConfig
from sui_graph.connection import Connection, Edge
from sui_graph.models import Balance, Base64, ObjectKind, SuiAddress, TransactionBlock
from sui_graph.nodes import Object
from sui_graph.providers import InMemoryDataProvider

# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------

ALICE = SuiAddress.from_str("0xa11ce")
BOB = SuiAddress.from_str("0xb0b")
COIN_TYPE = "0x2::coin::Coin<0x2::sui::SUI>"
USDC_TYPE = "0xdba3::usdc::USDC"


@pytest.fixture()
def alice() -> SuiAddress:
    return ALICE


@pytest.fixture()
def bob() -> SuiAddress:
    return BOB


# ---------------------------------------------------------------------------
# Object fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_object() -> Object:
    """Owned object 0xAA at version 3, owned by 0xBB."""
    return Object(
        address=SuiAddress.from_str("0xAA"),
        version=3,
        digest="d3",
        storage_rebate=988000,
        owner=SuiAddress.from_str("0xBB"),
        bcs=Base64(b"\x01\x02\x03"),
        previous_transaction="t2",
        kind=ObjectKind.OWNED,
    )


@pytest.fixture()
def genesis_object() -> Object:
    return Object(
        address=SuiAddress.from_str("0x5"),
        version=1,
        digest="g1",
        kind=ObjectKind.SHARED,
    )


@pytest.fixture()
def sample_page(sample_object: Object) -> Connection[Object]:
    return Connection.from_edges(
        [Edge(cursor="c1", node=sample_object)],
        has_next_page=True,
        has_previous_page=False,
    )


@pytest.fixture()
def mock_provider() -> AsyncMock:
    return AsyncMock()


# ---------------------------------------------------------------------------
# In-memory store
# ---------------------------------------------------------------------------


def _obj(
    address: str, version: int, owner: SuiAddress | None, kind: ObjectKind
) -> Object:
    return Object(
        address=SuiAddress.from_str(address),
        version=version,
        digest=f"digest-{address}-{version}",
        owner=owner,
        previous_transaction=f"tx-{address}-{version}",
        kind=kind,
    )


@pytest.fixture()
def memory_provider() -> InMemoryDataProvider:
    """Alice owns five objects (0x11..0x15), Bob owns one, plus a shared object.

    0x11 exists at versions 1 and 4; 0x14 is a USDC coin, the rest SUI coins.
    """
    provider = InMemoryDataProvider(
        PaginationConfig(default_page_size=2, max_page_size=3)
    )
    provider.add_object(_obj("0x11", 1, ALICE, ObjectKind.OWNED), COIN_TYPE)
    provider.add_object(_obj("0x11", 4, ALICE, ObjectKind.OWNED), COIN_TYPE)
    provider.add_object(_obj("0x12", 2, ALICE, ObjectKind.OWNED), COIN_TYPE)
    provider.add_object(_obj("0x13", 7, ALICE, ObjectKind.OWNED), COIN_TYPE)
    provider.add_object(
        _obj("0x14", 3, ALICE, ObjectKind.OWNED), f"0x2::coin::Coin<{USDC_TYPE}>"
    )
    provider.add_object(
        _obj("0x15", 9, ALICE, ObjectKind.CHILD), "0x2::dynamic_field::Field<u64, u64>"
    )
    provider.add_object(_obj("0x21", 5, BOB, ObjectKind.OWNED), COIN_TYPE)
    provider.add_object(
        _obj("0x31", 2, None, ObjectKind.SHARED), "0x3::staking_pool::StakingPool"
    )

    provider.add_transaction(
        TransactionBlock(
            digest="tx-0x11-4", sender=ALICE, checkpoint=10, timestamp_ms=1700000000000
        )
    )
    provider.add_balance(
        ALICE,
        Balance(coin_type="0x2::sui::SUI", coin_object_count=3, total_balance=1500),
    )
    provider.add_balance(
        ALICE, Balance(coin_type=USDC_TYPE, coin_object_count=1, total_balance=42)
    )
    return provider


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    provider:
      rpc_endpoints: ["https://rpc1.example.com", "https://rpc2.example.com"]
      rpc_timeout: 10
    pagination:
      default_page_size: 10
      max_page_size: 25
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
