from datetime import date, datetime, timedelta, timezone

from studyplanner.enums import ReminderType
from studyplanner.reminders import list_due_topics, list_reminders, list_upcoming_exams


def test_upcoming_exams_sorted_and_filtered(db, make_user, make_subject, now):
    user = make_user()
    other = make_user()
    make_subject(user.id, name="Later", exam_date=date(2026, 4, 1))
    make_subject(user.id, name="No exam")
    make_subject(user.id, name="Today", exam_date=date(2026, 3, 10))
    make_subject(user.id, name="Past", exam_date=date(2026, 3, 1))
    make_subject(user.id, name="Soon", exam_date=date(2026, 3, 20))
    make_subject(other.id, name="Not mine", exam_date=date(2026, 3, 15))

    exams = list_upcoming_exams(db, user.id, now=now)

    assert [s.name for s in exams] == ["Today", "Soon", "Later"]


def test_no_upcoming_exams_without_subjects(db, make_user, now):
    assert list_upcoming_exams(db, make_user().id, now=now) == []


def test_overdue_and_urgent_for_same_topic(db, make_user, make_subject, make_topic, now):
    user = make_user()
    exam_subject = make_subject(user.id, name="Physics", exam_date=date(2026, 3, 11))
    calm_subject = make_subject(user.id, name="Art")
    make_topic(exam_subject, name="Optics", status="new", difficulty="hard",
               next_review_date=date(2026, 3, 9))
    make_topic(calm_subject, name="Colour", status="revised", difficulty="easy")

    reminders = list_reminders(db, user.id, now=now)

    assert [r.type for r in reminders] == [ReminderType.OVERDUE, ReminderType.URGENT]
    assert all(r.topic == "Optics" and r.subject == "Physics" for r in reminders)
    assert reminders[0].message == 'Topic "Optics" in subject "Physics" is overdue for review.'
    assert reminders[1].message == 'Topic "Optics" in subject "Physics" is urgent! Exam in 1 days.'


def test_urgent_message_rounds_days_up(db, make_user, make_subject, make_topic, now):
    user = make_user()
    subject = make_subject(user.id, name="Law", exam_date=date(2026, 3, 15))
    make_topic(subject, name="Contracts", status="learning")

    reminders = list_reminders(db, user.id, now=now)

    # 4.625 days away
    assert len(reminders) == 1
    assert reminders[0].type == ReminderType.URGENT
    assert reminders[0].message.endswith("Exam in 5 days.")


def test_revised_topics_are_never_urgent(db, make_user, make_subject, make_topic, now):
    user = make_user()
    subject = make_subject(user.id, exam_date=date(2026, 3, 12))
    make_topic(subject, status="revised")

    assert list_reminders(db, user.id, now=now) == []


def test_exam_outside_urgent_window(db, make_user, make_subject, make_topic, now):
    user = make_user()
    far = make_subject(user.id, name="Far", exam_date=date(2026, 3, 18))
    past = make_subject(user.id, name="Past", exam_date=date(2026, 3, 10))
    make_topic(far, status="new")
    make_topic(past, status="new")

    assert list_reminders(db, user.id, now=now) == []


def test_review_due_now_is_not_overdue(db, make_user, make_subject, make_topic):
    user = make_user()
    make_topic(make_subject(user.id), next_review_date=date(2026, 3, 10))

    assert list_reminders(db, user.id, now=datetime(2026, 3, 10)) == []
    overdue = list_reminders(db, user.id, now=datetime(2026, 3, 10, 0, 1))
    assert [r.type for r in overdue] == [ReminderType.OVERDUE]


def test_reminders_skip_orphan_topics(db, make_user, make_topic, now):
    user = make_user()
    make_topic(name="Lost", user_id=user.id, subject_id=777, next_review_date=date(2026, 1, 1))

    assert list_reminders(db, user.id, now=now) == []


def test_reminders_carry_identifiers(db, make_user, make_subject, make_topic, now):
    user = make_user()
    subject = make_subject(user.id)
    topic = make_topic(subject, next_review_date=date(2026, 3, 2))

    reminder = list_reminders(db, user.id, now=now)[0]

    assert reminder.topic_id == topic.id
    assert reminder.subject_id == subject.id


def test_due_topics_include_overdue_and_next_day(db, make_user, make_subject, make_topic, now):
    user = make_user()
    subject = make_subject(user.id)
    make_topic(subject, name="Tomorrow", next_review_date=date(2026, 3, 11))
    make_topic(subject, name="Overdue", next_review_date=date(2026, 3, 5))
    make_topic(subject, name="Next week", next_review_date=date(2026, 3, 17))
    make_topic(subject, name="Unscheduled")

    due = list_due_topics(db, user.id, now=now)

    assert [t.name for t in due] == ["Overdue", "Tomorrow"]


def test_aware_reference_instant_is_converted_to_utc(db, make_user, make_subject, make_topic, now):
    user = make_user()
    subject = make_subject(user.id, name="Physics", exam_date=date(2026, 3, 9))
    make_topic(subject, name="Optics", next_review_date=date(2026, 3, 9))

    # 00:30 in UTC+2 is still 9 March in UTC
    local = datetime(2026, 3, 10, 0, 30, tzinfo=timezone(timedelta(hours=2)))

    assert [s.name for s in list_upcoming_exams(db, user.id, now=local)] == ["Physics"]
    assert list_reminders(db, user.id, now=now.replace(tzinfo=timezone.utc)) == list_reminders(db, user.id, now=now)
