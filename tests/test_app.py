"""
Menu shell scenarios.

Why:
    Each menu option must map onto the roster operation it names, invalid
    choices must never end the session, and deletion needs an explicit "y".
"""
from decimal import Decimal

from edcentre.core.enums import Role
from edcentre.store import RosterRepository


ADD_TEACHER = ["1", "1", "Tom", "0123456789", "tom@example.com", "3000", "Math", ""]
ADD_ADMIN_BLANK = ["1", "2", "Ada", "0123456780", "ada@example.com", "", "", ""]
ADD_ALICE_1 = ["1", "3", "Alice", "0111111111", "a1@example.com", "", "", ""]
ADD_ALICE_2 = ["1", "3", "Alice", "0222222222", "a2@example.com", "", "", ""]


def test_exit_option_stops_the_loop(make_app):
    app, console = make_app("6")
    app.run()
    assert not app.running
    assert console.remaining == 0
    assert "        DESKTOP INFORMATION SYSTEM         " in console.output


def test_closed_input_ends_the_session(make_app):
    app, console = make_app("2")
    app.run()
    assert not app.running
    assert "No records found." in console.output


def test_invalid_menu_option_reprompts(make_app):
    app, console = make_app("9", "", "abc", "", "6", pause=True)
    app.run()
    assert console.prompts.count("Invalid option. Press Enter to try again.") == 2
    assert not app.running


def test_invalid_menu_option_waits_even_without_pause(make_app):
    app, console = make_app("9", "6", "6")
    app.run()
    assert console.prompts.count("Invalid option. Press Enter to try again.") == 1
    # the "6" after the message only acknowledged it; the next one exits
    assert console.remaining == 0


def test_add_teacher(make_app):
    app, console = make_app(*ADD_TEACHER, "6")
    app.run()
    record = app.roster.find_by_name("tom")
    assert record.role is Role.TEACHER
    assert record.salary == Decimal(3000)
    assert record.subjects == ["Math", ""]
    assert "Record added successfully!" in console.output


def test_add_admin_with_blank_optionals(make_app):
    app, _ = make_app(*ADD_ADMIN_BLANK, "6")
    app.run()
    admin = app.roster.find_by_name("Ada")
    assert admin.salary == Decimal(0)
    assert admin.is_full_time is False
    assert admin.working_hours == 0


def test_add_with_invalid_role_returns_to_menu(make_app):
    app, console = make_app("1", "4", "", "6")
    app.run()
    assert app.roster.is_empty()
    assert "Invalid role. Press Enter." in console.prompts
    assert console.remaining == 0


def test_view_all_lists_every_record(make_app):
    app, console = make_app(*ADD_TEACHER, *ADD_ADMIN_BLANK, "2", "6")
    app.run()
    assert "Name:  Tom" in console.output
    assert "Name:  Ada" in console.output
    assert "No records found." not in console.output


def test_view_by_group(make_app):
    app, console = make_app(*ADD_TEACHER, *ADD_ADMIN_BLANK, "3", "ADMIN", "3", "student", "6")
    app.run()
    assert "Name:  Ada" in console.output
    assert "Name:  Tom" not in console.output
    assert console.output.count("No records found for this role.") == 1


def test_edit_record(make_app):
    app, console = make_app(*ADD_TEACHER, "4", "TOM", "Thomas", "", "", "-50", "", "Art", "6")
    app.run()
    record = app.roster.find_by_name("thomas")
    assert record.salary == Decimal(3000)
    assert record.subjects == ["Math", "Art"]
    assert "[ Current Details ]" in console.output
    assert "Record updated successfully!" in console.output


def test_edit_unknown_person(make_app):
    app, console = make_app(*ADD_TEACHER, "4", "Nobody", "6")
    app.run()
    assert "Person not found." in console.output
    assert "Record updated successfully!" not in console.output


def test_blank_name_lookup_is_silent(make_app):
    app, console = make_app("5", "  ", "6")
    app.run()
    assert "Person not found." not in console.output


def test_delete_requires_y(make_app):
    app, console = make_app(*ADD_ALICE_1, "5", "alice", "n", "5", "alice", "yes", "6")
    app.run()
    assert app.roster.count() == 1
    assert console.output.count("Cancelled.") == 2
    assert "Are you sure you want to delete Alice? (y/n): " in console.prompts


def test_delete_duplicates_first_match_first(make_app):
    app, console = make_app(*ADD_ALICE_1, *ADD_ALICE_2, "5", "ALICE", "Y", "6")
    app.run()
    remaining = app.roster.find_by_name("alice")
    assert remaining.telephone == "0222222222"
    assert "Record deleted." in console.output


def test_pause_after_each_action(make_app):
    app, console = make_app("2", "", "6", pause=True)
    app.run()
    assert "Press Enter to return..." in console.prompts


def test_uses_supplied_roster(make_app):
    roster = RosterRepository()
    app, _ = make_app(*ADD_ALICE_1, "6", roster=roster)
    app.run()
    assert roster.count() == 1


def test_sample_data(make_app):
    app, _ = make_app()
    app.create_sample_data()
    assert app.roster.count_by_role() == {Role.TEACHER: 1, Role.ADMIN: 1, Role.STUDENT: 1}
