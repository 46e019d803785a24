# courtbook

An interactive court reservation system for the terminal. It keeps a
schedule of three courts over fourteen days (shown as 1–14 April 2023). Each
day is split into 36 half-hour slots, numbered 0–35, from 06:00 to midnight.
A slot holds at most two players.

## Installing

    pip install .

For the tests:

    pip install .[test]
    pytest

## Running

    courtbook [--data-dir DIR]

The schedule is read from `DIR` (default `data`, relative to the current
working directory) at start and written back when the session ends, either
with `q` or at the end of input:

- `Court<N>Day<D>.txt` — one file per court (1–3) and day (0–13), one line
  per slot in the form `users;skill;free;type`, where `users` is a
  space-separated list of names or `nouser`, and `skill` is the first
  player's skill grade or `noskill`. A missing file leaves that day's court
  free; a file with fewer than 36 records is an error.
- `users.txt` — one known username per line.

At start you either register (`r`) as a member (`m`), coach (`c`) or officer
(`o`), or log in (`l`) by typing the name of one of the known users. Members
and officers give a skill grade `A`, `B` or `C`; coaches get grade `P`.

You then see the grid for the current day and can press:

- `n` — next day (after day 14 it wraps back to day 1)
- `b` — previous day (stops at day 1)
- `a` — add a reservation: asks for a day (1–14), a slot (0–35) and a court (1–3)
- `c` — cancel: asks for a day, slot and court, and frees that slot on the
  day currently shown (the day asked for is not used)
- `m` — read messages
- `t` — send a one-word message
- `q` — quit and save

The menu offers `c` and `m` to officers (and to users named `officer1` or
`officer2`) and `t` to everyone else.

### Booking rules

Joining an empty slot books you alone and leaves the slot open; joining a
slot that holds one player fills it; a slot with two players is reported as
full. The kind of booking depends on who you are:

- members: `Game`
- officers: `Open Play with`, and only slots 18–24
- coaches: `Reserved for coaching by`, only on days 3–14 that are not
  days 6 or 12, and only slots 5–11 or 18–24

Users loaded from `users.txt` have no known role; they book as `Game`
unless their name is `coach1`/`coach2` (coaching) or `officer1`/`officer2`
(open play), without the time and day rules.

## Using it as a library

    from courtbook.user import Member
    from courtbook.reservation import Reservation
    from courtbook.schedule import DaySchedule, time_slot_label
    from courtbook.storage import load_schedules, save_schedules

    password = "password"
    day = DaySchedule()
    day.set_reservation(1, 0, Reservation([Member("alice", password, "A")], True, "Game "))
    print(day.court_info(1).splitlines()[0])   # alice;A;1;Game 
    print(time_slot_label(0))                  # 06:00 - 06:30
    print(day.render_grid())

- `courtbook.user` — `User`, `Member`, `Coach`, `Officer`
- `courtbook.reservation` — `Reservation` with `add_user`, `modify`,
  `to_record` and a printable form
- `courtbook.schedule` — `DaySchedule` (`court`, `set_reservation`,
  `modify_reservation`, `cancel_reservation`, `court_info`, `render_grid`,
  `add_member`) and `time_slot_label`
- `courtbook.storage` — `parse_court_records`, `load_schedules`,
  `save_schedules`, `load_users`, `save_users`
- `courtbook.cli` — `Session` and `run(data_dir, stdin, stdout)` for driving
  a session from any text streams

## What it does not do

- Passwords are asked for at registration but never checked at login and
  never saved; only usernames are kept in `users.txt`, so roles and skill
  grades are lost between sessions.
- Messages sent with `t` last only for the current session.
- The calendar is fixed at fourteen days; there is no real date handling.