import typer
from rich.console import Console
from rich.table import Table
from typing import Optional
from datetime import datetime

from studyplanner.database import SessionLocal, init_db
from studyplanner.crud import (
    create_user, get_user, update_user_preferences,
    create_subject, get_subjects_by_user, delete_subject,
    create_topic, update_topic, coerce_id
)
from studyplanner.enums import DailyStudyGoal, Difficulty, PriorityWeight, TopicStatus
from studyplanner.errors import StudyPlannerError
from studyplanner.logging_config import setup_logging
from studyplanner.reminders import list_reminders, list_upcoming_exams
from studyplanner.scheduler import build_schedule, target_topic_count
from studyplanner.schemas import (
    UserCreate, PreferencesUpdate, SubjectCreate, TopicCreate, TopicUpdate, ScheduledTopic
)

app = typer.Typer(help="Study Planner CLI - priority-ranked review schedules, exams and reminders")
console = Console()


@app.callback()
def main(log_level: Optional[str] = typer.Option(None, help="Log level (default from settings)")):
    """Configure logging before any command runs"""
    setup_logging(log_level)


def parse_date(value: Optional[str]):
    """Parse a YYYY-MM-DD option into a date"""
    if not value:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        console.print(f"[red]✗[/red] Invalid date '{value}', expected YYYY-MM-DD")
        raise typer.Exit(code=1)


def parse_choice(enum_cls, value: Optional[str], label: str):
    """Validate an option against a closed set of values"""
    if value is None:
        return None
    parsed = enum_cls.parse(value)
    if parsed is None:
        console.print(f"[red]✗[/red] Invalid {label} '{value}'. Use one of: {', '.join(enum_cls.values())}")
        raise typer.Exit(code=1)
    return parsed


def fail(error: Exception):
    console.print(f"[red]✗[/red] {error}")
    raise typer.Exit(code=1)


@app.command()
def init():
    """Initialize database tables"""
    init_db()
    console.print("[green]✓[/green] Database initialized successfully!")


@app.command()
def reset_db():
    """Delete all data and reinitialize database (WARNING: irreversible!)"""
    confirm = typer.confirm("⚠️  This will DELETE ALL DATA. Are you sure?")
    if not confirm:
        console.print("[yellow]Cancelled.[/yellow]")
        return

    from studyplanner.database import engine, Base
    console.print("[yellow]Dropping all tables...[/yellow]")
    Base.metadata.drop_all(bind=engine)
    console.print("[yellow]Recreating tables...[/yellow]")
    init_db()
    console.print("[green]✓[/green] Database reset complete! All data deleted.")


@app.command()
def create_profile(
    name: str = typer.Option(..., prompt="Name"),
    email: str = typer.Option(..., prompt="Email"),
    priority_weight: Optional[str] = typer.Option(None, help="Balanced / Focus on Hard Topics / Focus on Easy Topics"),
    daily_goal: Optional[str] = typer.Option(None, help="30 minutes / 1 hour / 2 hours / 3 hours / 4+ hours")
):
    """Create a new learner profile"""
    weight = parse_choice(PriorityWeight, priority_weight, "priority weight")
    goal = parse_choice(DailyStudyGoal, daily_goal, "daily study goal")
    db = SessionLocal()
    try:
        user = create_user(db, UserCreate(
            name=name,
            email=email,
            topic_priority_weight=weight,
            daily_study_goal=goal
        ))
        console.print(f"[green]✓[/green] Profile created successfully! User ID: {user.id}")
        console.print(f"  Name: {user.name} ({user.email})")
        console.print(f"  Priority weight: {user.topic_priority_weight or 'Balanced'}")
        console.print(f"  Daily goal: {user.daily_study_goal or 'not set'} "
                      f"({target_topic_count(user.daily_study_goal)} topics per session)")
    except StudyPlannerError as e:
        fail(e)
    finally:
        db.close()


@app.command()
def set_preferences(
    user_id: str = typer.Option(..., prompt="User ID"),
    priority_weight: Optional[str] = typer.Option(None, help="Balanced / Focus on Hard Topics / Focus on Easy Topics"),
    daily_goal: Optional[str] = typer.Option(None, help="30 minutes / 1 hour / 2 hours / 3 hours / 4+ hours"),
    notifications: Optional[bool] = typer.Option(None, "--notifications/--no-notifications", help="Enable reminder notifications")
):
    """Update study preferences"""
    updates = PreferencesUpdate(
        topic_priority_weight=parse_choice(PriorityWeight, priority_weight, "priority weight"),
        daily_study_goal=parse_choice(DailyStudyGoal, daily_goal, "daily study goal"),
        email_notifications_enabled=notifications
    )
    db = SessionLocal()
    try:
        user = update_user_preferences(db, user_id, updates)
        console.print(f"[green]✓[/green] Preferences updated for user {user.id}")
        console.print(f"  Priority weight: {user.topic_priority_weight or 'Balanced'}")
        console.print(f"  Daily goal: {user.daily_study_goal or 'not set'}")
        console.print(f"  Notifications: {'on' if user.email_notifications_enabled else 'off'}")
    except StudyPlannerError as e:
        fail(e)
    finally:
        db.close()


@app.command()
def add_subject(
    user_id: str = typer.Option(..., prompt="User ID"),
    name: str = typer.Option(..., prompt="Subject name"),
    exam_date: Optional[str] = typer.Option(None, help="Exam date (YYYY-MM-DD)")
):
    """Add a subject, optionally with an exam date"""
    exam = parse_date(exam_date)
    db = SessionLocal()
    try:
        if get_user(db, user_id) is None:
            console.print(f"[red]✗[/red] User ID {user_id} not found")
            raise typer.Exit(code=1)
        subject = create_subject(db, user_id, SubjectCreate(name=name, exam_date=exam))
        console.print(f"[green]✓[/green] Subject created! ID: {subject.id}")
        if subject.exam_date:
            console.print(f"  Exam date: {subject.exam_date}")
    except StudyPlannerError as e:
        fail(e)
    finally:
        db.close()


@app.command()
def list_subjects(user_id: str):
    """List a user's subjects"""
    db = SessionLocal()
    try:
        subjects = get_subjects_by_user(db, user_id)
        console.print(f"\n[bold]Subjects for user {user_id}:[/bold]")
        if not subjects:
            console.print("  [dim]No subjects yet[/dim]")
        for subject in subjects:
            exam = f" (exam {subject.exam_date})" if subject.exam_date else ""
            console.print(f"  {subject.id}. {subject.name}{exam} - {len(subject.topics)} topics")
    except StudyPlannerError as e:
        fail(e)
    finally:
        db.close()


@app.command("delete-subject")
def delete_subject_command(
    subject_id: str,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation")
):
    """Delete a subject and all of its topics"""
    if not yes and not typer.confirm(f"Delete subject {subject_id} and all its topics?"):
        console.print("[yellow]Cancelled.[/yellow]")
        return
    db = SessionLocal()
    try:
        removed = delete_subject(db, subject_id)
        console.print(f"[green]✓[/green] Subject deleted along with {removed} topics")
    except StudyPlannerError as e:
        fail(e)
    finally:
        db.close()


@app.command()
def add_topic(
    user_id: str = typer.Option(..., prompt="User ID"),
    subject_id: str = typer.Option(..., prompt="Subject ID"),
    name: str = typer.Option(..., prompt="Topic name"),
    difficulty: str = typer.Option("medium", help="easy / medium / hard"),
    status: str = typer.Option("new", help="new / learning / revised"),
    next_review: Optional[str] = typer.Option(None, help="Next review date (YYYY-MM-DD), default from difficulty")
):
    """Add a topic to a subject"""
    difficulty_value = parse_choice(Difficulty, difficulty, "difficulty")
    status_value = parse_choice(TopicStatus, status, "status")
    review_date = parse_date(next_review)
    db = SessionLocal()
    try:
        topic_data = TopicCreate(
            subject_id=coerce_id(subject_id, "subject"),
            name=name,
            difficulty=difficulty_value,
            status=status_value,
            next_review_date=review_date
        )
        topic = create_topic(db, user_id, topic_data)
        console.print(f"[green]✓[/green] Topic created! ID: {topic.id}")
        console.print(f"  Next review: {topic.next_review_date}")
    except StudyPlannerError as e:
        fail(e)
    finally:
        db.close()


@app.command("update-topic")
def update_topic_command(
    topic_id: str,
    name: Optional[str] = typer.Option(None, help="New topic name"),
    difficulty: Optional[str] = typer.Option(None, help="easy / medium / hard"),
    status: Optional[str] = typer.Option(None, help="new / learning / revised"),
    next_review: Optional[str] = typer.Option(None, help="Next review date (YYYY-MM-DD)")
):
    """Update a topic; marking it learning/revised reschedules its review"""
    topic_data = TopicUpdate(
        name=name,
        difficulty=parse_choice(Difficulty, difficulty, "difficulty"),
        status=parse_choice(TopicStatus, status, "status"),
        next_review_date=parse_date(next_review)
    )
    db = SessionLocal()
    try:
        topic = update_topic(db, topic_id, topic_data)
        console.print(f"[green]✓[/green] Topic {topic.id} updated")
        console.print(f"  Status: {topic.status}, difficulty: {topic.difficulty}")
        console.print(f"  Next review: {topic.next_review_date}")
    except StudyPlannerError as e:
        fail(e)
    finally:
        db.close()


@app.command()
def schedule(user_id: str):
    """Show the priority-ranked study schedule"""
    db = SessionLocal()
    try:
        topics = [ScheduledTopic.from_topic(t) for t in build_schedule(db, user_id)]
        if not topics:
            console.print(f"[yellow]No topics found for user {user_id}[/yellow]")
            return

        console.print(f"\n[bold]Study Schedule[/bold] ({len(topics)} topics)\n")
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Subject", style="cyan")
        table.add_column("Topic", style="green")
        table.add_column("Status", style="yellow")
        table.add_column("Difficulty")
        table.add_column("Next Review")
        table.add_column("Score", style="blue", justify="right")

        for rank, topic in enumerate(topics, 1):
            table.add_row(
                str(rank),
                topic.subject_name or "?",
                topic.name[:50],
                topic.status,
                topic.difficulty,
                str(topic.next_review_date or "-"),
                f"{topic.priority_score:.1f}"
            )

        console.print(table)
    except StudyPlannerError as e:
        fail(e)
    finally:
        db.close()


@app.command()
def exams(user_id: str):
    """List upcoming exams, soonest first"""
    db = SessionLocal()
    try:
        subjects = list_upcoming_exams(db, user_id)
        if not subjects:
            console.print(f"[yellow]No upcoming exams for user {user_id}[/yellow]")
            return

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Subject", style="cyan")
        table.add_column("Exam Date", style="yellow")
        table.add_column("Days Left", style="red", justify="right")
        for subject in subjects:
            days_left = (subject.exam_date - datetime.utcnow().date()).days
            table.add_row(subject.name, str(subject.exam_date), str(days_left))
        console.print(table)
    except StudyPlannerError as e:
        fail(e)
    finally:
        db.close()


@app.command()
def reminders(user_id: str):
    """Show overdue and urgent topic reminders"""
    db = SessionLocal()
    try:
        items = list_reminders(db, user_id)
        if not items:
            console.print(f"[green]✓[/green] Nothing overdue or urgent for user {user_id}")
            return

        for reminder in items:
            colour = "red" if reminder.type == "overdue" else "yellow"
            console.print(f"  [{colour}]{reminder.type.value.upper()}[/{colour}] {reminder.message}")
    except StudyPlannerError as e:
        fail(e)
    finally:
        db.close()


if __name__ == "__main__":
    app()
