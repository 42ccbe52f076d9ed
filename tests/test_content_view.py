"""Tests for ContentView — cards follow the store, the add form comes and goes."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dadjokes.const import DELETE_DELAY_SECONDS
from dadjokes.views.content_view import ContentView


def fail_commit(self):
    raise SQLAlchemyError("database is locked")


def test_one_card_per_joke_in_setup_order(store, loop):
    store.add("B", "x", "Sob")
    store.add("A", "y", "Sigh")

    view = ContentView(store, loop)

    assert [card.joke.setup for card in view.visible_cards] == ["A", "B"]


def test_new_jokes_get_a_card_without_refreshing_by_hand(store, loop):
    view = ContentView(store, loop)
    assert view.visible_cards == []

    store.add("A", "y", "Sigh")

    assert [card.joke.setup for card in view.visible_cards] == ["A"]


def test_surviving_cards_keep_their_state(store, loop):
    store.add("B", "x", "Sob")
    view = ContentView(store, loop)
    view.card_at(0).tap()

    store.add("A", "y", "Sigh")

    assert view.card_at(1).joke.setup == "B"
    assert view.card_at(1).showing_punchline is True
    assert view.card_at(0).showing_punchline is False


def test_swiped_card_disappears_after_the_delay(store, loop, run_loop):
    store.add("A", "y", "Sigh")
    store.add("B", "x", "Sob")
    view = ContentView(store, loop)

    view.card_at(0).drag_ended((0, -250))
    assert [card.joke.setup for card in view.visible_cards] == ["B"]
    assert "#2" not in view.render()
    assert len(view.cards) == 2

    run_loop(DELETE_DELAY_SECONDS + 0.1)
    assert [card.joke.setup for card in view.visible_cards] == ["B"]
    assert len(view.cards) == 1


def test_removed_joke_cancels_its_card(store, loop, run_loop):
    store.add("A", "y", "Sigh")
    view = ContentView(store, loop)
    card = view.card_at(0)
    card.drag_ended((0, -250))

    store.remove(card.joke)

    assert not card.is_deleting
    assert view.cards == {}
    run_loop(DELETE_DELAY_SECONDS + 0.1)
    assert store.count() == 0


def test_add_button_toggles_the_form(store, loop):
    view = ContentView(store, loop)

    view.toggle_add_joke()
    assert view.showing_add_joke is True
    assert view.add_view is not None
    assert "Add New Joke" in view.render()

    view.toggle_add_joke()
    assert view.showing_add_joke is False
    assert view.add_view is None


def test_saving_the_form_closes_it(store, loop):
    view = ContentView(store, loop)
    view.toggle_add_joke()
    view.add_view.setup = "A"
    view.add_view.punchline = "y"

    assert view.add_view.submit() is True
    assert view.showing_add_joke is False
    assert [card.joke.setup for card in view.visible_cards] == ["A"]


def test_render_lays_cards_side_by_side(store, loop):
    store.add("A", "y", "Sigh")
    store.add("B", "x", "Sob")
    view = ContentView(store, loop)

    screen = view.render()

    assert screen.startswith("All Groan Up")
    header = screen.splitlines()[2]
    assert header.index("#1") < header.index("#2")
    assert "( Add Joke )" in screen


def test_empty_gallery(store, loop):
    assert "No jokes yet" in ContentView(store, loop).render()


def test_close_stops_following_the_store(store, loop):
    view = ContentView(store, loop)
    view.close()

    store.add("A", "y", "Sigh")
    assert view.cards == {}


def test_failed_deferred_delete_leaves_no_gap(store, loop, run_loop, monkeypatch):
    store.add("A", "y", "Sigh")
    store.add("B", "x", "Sob")
    view = ContentView(store, loop)
    card = view.card_at(0)
    card.drag_ended((0, -250))

    monkeypatch.setattr(Session, "commit", fail_commit)
    run_loop(DELETE_DELAY_SECONDS + 0.1)
    monkeypatch.undo()

    assert store.count() == 2
    assert card.is_offscreen
    assert not card.is_deleting
    assert [card.joke.setup for card in view.visible_cards] == ["B"]
    screen = view.render()
    assert "#1" in screen
    assert "#2" not in screen


def test_list_edit_removal_counts_visible_cards(store, loop):
    store.add("A", "y", "Sigh")
    store.add("B", "x", "Sob")
    store.add("C", "z", "Smirk")
    view = ContentView(store, loop)
    view.card_at(0).drag_ended((0, -250))

    view.remove_jokes([1])

    assert [joke.setup for joke in store.query()] == ["A", "B"]
