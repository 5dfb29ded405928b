"""Tests for the reducer, the persisting store and the repository."""
import json

import pytest

from studiodesk.core.models import Coupon, ProjectStatus
from studiodesk.core.state import AppState
from studiodesk.quoting import QuotationDraft
from studiodesk.storage import MemoryStore, Repository
from studiodesk.store import Notifier, Store, actions as a, new_client, new_project, reduce


def test_repository_falls_back_to_bundled_data(repository):
    state = repository.load()

    assert [c.name for c in state.clients] == ["Acme Corp", "Ritu & Sandeep"]
    assert state.projects[0].status == ProjectStatus.SHOT
    assert [q.total_amount for q in state.quotations] == [7000, 12500]
    assert state.logs == ()
    assert state.session is None


def test_repository_prefers_stored_snapshots():
    memory = MemoryStore({"coupons": json.dumps([{"code": "ONLY", "discount_type": "Fixed", "value": 1}])})

    state = Repository(memory).load()

    assert [c.code for c in state.coupons] == ["ONLY"]
    assert len(state.clients) == 2


def test_repository_ignores_corrupt_snapshot(caplog):
    memory = MemoryStore({"clients": "{not json", "projects": json.dumps([{"id": "x", "status": "Bogus"}])})
    caplog.set_level("WARNING")

    state = Repository(memory).load()

    assert len(state.clients) == 2
    assert state.projects[0].id == "PRJ-2024-001"
    assert "clients" in caplog.text


@pytest.mark.parametrize(
    "key, raw",
    [
        ("clients", json.dumps({"id": "1"})),
        ("coupons", json.dumps([1, 2])),
        ("projects", json.dumps("PRJ-2024-001")),
    ],
)
def test_repository_ignores_snapshot_with_wrong_shape(key, raw, caplog):
    caplog.set_level("WARNING")

    state = Repository(MemoryStore({key: raw})).load()

    assert len(state.collection(key)) > 0
    assert f"Stored {key} could not be read" in caplog.text


def test_repository_ignores_session_with_wrong_shape():
    state = Repository(MemoryStore({"auth": json.dumps(["SystemAdmin"])})).load()

    assert state.session is None


def test_add_then_delete_coupon_by_code(store, memory_store):
    store.dispatch(a.AddCoupon(Coupon(code="FLASH50", discount_type="Percentage", value=50)))
    assert "FLASH50" in [c.code for c in store.state.coupons]

    store.dispatch(a.DeleteCoupon("FLASH50"))

    codes = [c.code for c in store.state.coupons]
    assert "FLASH50" not in codes
    assert codes == ["WINTER20", "FIRST500"]
    stored = json.loads(memory_store.get("coupons"))
    assert [row["code"] for row in stored] == ["WINTER20", "FIRST500"]


def test_delete_removes_exactly_one_record(store):
    before = store.state.contractors

    store.dispatch(a.DeleteFreelancer("f2"))

    after = store.state.contractors
    assert len(after) == len(before) - 1
    assert [f.to_dict() for f in after] == [f.to_dict() for f in before if f.id != "f2"]


def test_missing_ids_are_noops(store, memory_store):
    before = store.state

    store.dispatch(a.DeleteClient("nope"))
    store.dispatch(a.MoveProject("nope", "forward"))
    store.dispatch(a.SetAssetStatus("nope", "Maintenance"))

    assert store.state.clients == before.clients
    assert store.state.projects == before.projects
    assert store.state.assets == before.assets
    assert memory_store.data == {}


def test_move_project_persists_status(store, memory_store):
    store.dispatch(a.MoveProject("PRJ-2024-001", "forward"))

    assert store.state.projects[0].status == ProjectStatus.POST_PRODUCTION
    stored = json.loads(memory_store.get("projects"))
    assert stored[0]["status"] == "Post-Production"


def test_reduce_is_pure():
    state = AppState()
    client = new_client("  ")

    after = reduce(state, a.AddClient(client))

    assert state.clients == ()
    assert after.clients == (client,)
    assert client.name == "Unknown"
    assert client.total_revenue == 0 and client.past_projects == 0


def test_new_projects_are_prepended_at_inquiry(store):
    project = new_project("Corporate Headshots", "1", store.state.clients, budget=8000)

    store.dispatch(a.AddProject(project))

    first = store.state.projects[0]
    assert first.id == project.id
    assert first.status == ProjectStatus.INQUIRY
    assert first.client_name == "Acme Corp"
    assert first.outstanding_amount == 8000


def test_deleting_client_does_not_cascade(store):
    store.dispatch(a.DeleteClient("2"))

    assert [c.id for c in store.state.clients] == ["1"]
    assert store.state.projects[0].client_id == "2"


def test_asset_status_toggle_and_explicit_status(store):
    store.dispatch(a.ToggleAssetStatus("a1"))
    assert store.state.assets[0].status == "In Use"

    store.dispatch(a.ToggleAssetStatus("a1"))
    assert store.state.assets[0].status == "Available"

    store.dispatch(a.SetAssetStatus("a1", "Maintenance"))
    assert store.state.assets[0].status == "Maintenance"

    with pytest.raises(ValueError):
        store.dispatch(a.SetAssetStatus("a1", "Lost"))


def test_freelancer_updates(store):
    store.dispatch(a.UpdateFreelancerRating("f1", 4.2))
    store.dispatch(a.SetFreelancerStatus("f1", "On Shoot"))
    store.dispatch(a.UpdateFreelancerOptions("f1", {"suitable_categories": ["Music Video"]}))

    rahul = store.state.contractors[0]
    assert (rahul.rating, rahul.status, rahul.suitable_categories) == (4.2, "On Shoot", ["Music Video"])


def test_delete_service_category_only_hits_matching_pillar(store):
    store.dispatch(a.DeleteServiceCategory("Photography", "Wedding"))

    assert [s.id for s in store.state.services] == ["s3"]
    assert store.notifier.active()[-1].text == "Wedding Service Group Purged"


def test_save_quotation_adds_then_edits(store):
    draft = QuotationDraft(client_id="1")
    draft.add_manual_item("Brand Film", 15000)
    saved = store.save_quotation(draft, status="Draft")
    assert store.state.quotations[0].id == saved.id

    edit = QuotationDraft.from_quotation(saved)
    edit.add_manual_item("Teaser Cut", 2000)
    store.save_quotation(edit, status="Sent")

    matching = [q for q in store.state.quotations if q.id == saved.id]
    assert len(matching) == 1
    assert matching[0].total_amount == 17000
    assert matching[0].status == "Sent"


def test_save_quotation_without_client_notifies(store):
    with pytest.raises(ValueError):
        store.save_quotation(QuotationDraft(client_id=""))

    assert store.notifier.active()[-1].kind == "error"


def test_login_writes_session_and_logout_deletes_it(store, memory_store):
    store.login("creative", "password")
    assert json.loads(memory_store.get("auth"))["name"] == "Creative Lead"
    assert "password" not in memory_store.get("auth")

    store.logout()
    assert store.state.session is None
    assert "auth" not in memory_store.data


def test_session_survives_reload(store, memory_store):
    store.login("SystemAdmin", "Admin00")

    reloaded = Repository(memory_store).load()

    assert reloaded.session.username == "SystemAdmin"


def test_reset_restores_clients_and_projects(store):
    store.dispatch(a.DeleteClient("1"))
    store.dispatch(a.DeleteProject("PRJ-2024-001"))
    store.dispatch(a.DeleteCoupon("WINTER20"))

    store.dispatch(a.ResetDemoData())

    assert len(store.state.clients) == 2
    assert len(store.state.projects) == 1
    assert [c.code for c in store.state.coupons] == ["FIRST500"]


def test_toggle_agency_config(store):
    assert store.state.agency.auto_invoicing is False

    store.dispatch(a.ToggleAgencyConfig("auto_invoicing"))

    assert store.state.agency.auto_invoicing is True
    assert store.notifier.active()[-1].text == "auto_invoicing protocol engaged"


def test_hooks_see_every_mutation(repository):
    seen = []
    store = Store(repository, hooks=[lambda action, before, after: seen.append(type(action).__name__)])

    store.dispatch(a.DeleteCoupon("WINTER20"))
    store.dispatch(a.DeleteCoupon("missing"))

    assert seen == ["DeleteCoupon", "DeleteCoupon"]


def test_notifications_expire(repository, clock):
    store = Store(repository, notifier=Notifier(ttl=3.0, clock=clock))

    store.dispatch(a.DeleteQuotation("QT-2024-881"))
    assert [(n.text, n.kind) for n in store.notifier.active()] == [("Quotation Purged", "error")]

    clock.now += 3.5
    assert store.notifier.active() == []


def test_failed_write_keeps_previous_state():
    class ReadOnlyStore(MemoryStore):
        def set(self, key, value):
            raise OSError("disk full")

    seen = []
    store = Store(Repository(ReadOnlyStore()), hooks=[lambda *args: seen.append(args)])
    before = store.state

    with pytest.raises(OSError):
        store.dispatch(a.DeleteCoupon("WINTER20"))

    assert store.state is before
    assert [c.code for c in store.state.coupons] == ["WINTER20", "FIRST500"]
    assert seen == []
    assert store.notifier.active() == []


def test_unsupported_action_is_rejected():
    class Bogus(a.Action):
        pass

    with pytest.raises(TypeError):
        reduce(AppState(), Bogus())
