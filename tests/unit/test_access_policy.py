import pytest

from storefront.domain.entities import User
from storefront.domain.errors import LoginRequiredError, PermissionDeniedError
from storefront.domain.policy import PolicyEngine


@pytest.fixture
def engine(rules):
    return PolicyEngine(rules.access)


def test_no_session_never_passes(engine):
    for capability in engine.capabilities:
        assert engine.check_permission(None, capability) is False


def test_admin_holds_everything(engine, admin):
    # Admin accounts pass even with an empty stored permission list
    assert admin.permissions == []
    for capability in engine.capabilities:
        assert engine.check_permission(admin, capability) is True
    assert engine.check_permission(admin, "not-declared") is True


def test_staff_only_granted(engine, staff):
    assert engine.check_permission(staff, "orders") is True
    assert engine.check_permission(staff, "products") is False
    assert engine.check_permission(staff, "users") is False


def test_require(engine, admin, staff):
    assert engine.require(admin, "settings") is admin
    with pytest.raises(LoginRequiredError):
        engine.require(None, "settings")
    with pytest.raises(PermissionDeniedError) as exc:
        engine.require(staff, "settings")
    assert exc.value.capability == "settings"


def test_visible_actions(engine, admin, staff):
    assert engine.visible_actions(admin) == ["products", "orders", "categories", "settings", "users"]
    assert engine.visible_actions(staff) == ["orders"]
    assert engine.visible_actions(None) == []


class TestNormalizePermissions:
    def test_admin_gets_full_list(self, engine):
        assert engine.normalize_permissions("admin", []) == list(engine.capabilities)

    def test_staff_order_and_dedupe(self, engine):
        assert engine.normalize_permissions("staff", ["users", "orders", "orders"]) == ["orders", "users"]

    def test_unknown_rejected(self, engine):
        with pytest.raises(ValueError):
            engine.normalize_permissions("staff", ["orders", "refunds"])


def test_default_engine_without_rules():
    engine = PolicyEngine()
    user = User(username="x", role="staff", permissions=["settings"])
    assert engine.visible_actions(user) == ["settings"]
