from datetime import datetime, timezone

from dotenv import load_dotenv
from pytest import fixture

from pasetomint.managers import KeyManager
from pasetomint.services import TokenMint

# Load all env variables.
load_dotenv()

TEST_KEY = "wubbalubbadubdubwubbalubbadubdub"


@fixture(scope="session")
def key_manager() -> KeyManager:
    """Create the key manager shared by the test session."""
    return KeyManager(TEST_KEY)


@fixture(scope="session")
def token_mint(key_manager: KeyManager) -> TokenMint:
    """Create token mint instance and return it."""
    return TokenMint(key_manager=key_manager)


@fixture
def fixed_now() -> datetime:
    """A fixed reference instant for relative time expressions."""
    return datetime(2024, 7, 23, 0, 20, 32, tzinfo=timezone.utc)
