"""
Scripted runs of the interactive menus. Input is fed line by line through a
patched input(); assertions look at the printed transcript and service state.
"""

import car_rental
from car_rental import RentalConsole


def feed(monkeypatch, lines):
    answers = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_customer_session_transcript(monkeypatch, capsys, service):
    feed(monkeypatch, [
        "1", "Alice Smith", "alice", "pw1",      # register
        "2", "alice", "pw1",                     # login
        "2", "1", "3",                           # rent Camry for 3 days
        "2", "1", "2",                           # rent it again
        "3", "2",                                # return a vehicle nobody rented
        "5", "Great service",                    # feedback
        "4",                                     # history
        "6",                                     # logout
        "4",                                     # exit
    ])

    RentalConsole(service).run()

    out = capsys.readouterr().out
    assert "✅ User registered successfully!" in out
    assert "✅ Login successful! Welcome, Alice Smith." in out
    assert "✅ Vehicle rented successfully!" in out
    assert "Total Cost: $150.00" in out
    assert "❌ Vehicle is already rented!" in out
    assert "❌ This vehicle is not currently rented." in out
    assert "✅ Feedback submitted. Thank you!" in out
    assert "----- Booking History for Alice Smith -----" in out
    assert "👋 Logging out..." in out
    assert "Goodbye!" in out
    assert service.current_session() is None


def test_failed_login_offers_password_reset(monkeypatch, capsys, service):
    service.register("Alice", "alice", "pw1")
    feed(monkeypatch, [
        "2", "alice", "wrong",
        "y", "alice", "fresh",
        "4",
    ])

    RentalConsole(service).run()

    out = capsys.readouterr().out
    assert "❌ Invalid username or password!" in out
    assert "✅ Password has been reset successfully for user alice!" in out
    assert service.login_customer("alice", "fresh")


def test_admin_session_transcript(monkeypatch, capsys, service):
    feed(monkeypatch, [
        "3", "admin", "admin123",
        "1", "2", "Jeep", "Wrangler", "72.5",    # add SUV
        "1", "7", "Kia", "Carnival", "70",       # unknown type
        "1", "1", "Kia", "Rio", "cheap",         # bad price
        "2",                                     # list all
        "3",                                     # feedback
        "4",                                     # logout
        "4",
    ])

    RentalConsole(service).run()

    out = capsys.readouterr().out
    assert "✅ Admin login successful!" in out
    assert "✅ SUV added successfully!" in out
    assert "❌ Invalid vehicle type!" in out
    assert "❌ Price per day must be a positive amount!" in out
    assert "4. SUV:   Jeep Wrangler - $72.50 per day (Available)" in out
    assert "No feedback has been submitted yet." in out
    assert "👋 Admin logged out." in out
    assert len(service.list_vehicles()) == 4


def test_bad_admin_credentials(monkeypatch, capsys, service):
    feed(monkeypatch, ["3", "admin", "guess", "4"])

    RentalConsole(service).run()

    assert "❌ Invalid admin credentials!" in capsys.readouterr().out


def test_non_numeric_choice_is_rejected(monkeypatch, capsys, service):
    feed(monkeypatch, ["abc", "9", "4"])

    RentalConsole(service).run()

    assert capsys.readouterr().out.count("❌ Invalid choice! Please try again.") == 2


def test_main_exits_cleanly_on_eof(monkeypatch, capsys):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)

    assert car_rental.main(["--no-seed"]) == 0
    assert "Goodbye!" in capsys.readouterr().out


def test_oversized_price_is_reported_not_raised(monkeypatch, capsys, service):
    feed(monkeypatch, [
        "3", "admin", "admin123",
        "1", "1", "Big", "Car", "99999999999999999999999999999",
        "4",
        "4",
    ])

    RentalConsole(service).run()

    out = capsys.readouterr().out
    assert "❌ Price per day cannot exceed $1000000.00!" in out
    assert len(service.list_vehicles()) == 3
