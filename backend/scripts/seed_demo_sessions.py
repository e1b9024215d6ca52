from trackpace.core.plan import PaceSource, RunParameters, derive_plan
from trackpace.core.splits import BasisMode
from trackpace.db import Base, SessionLocal, engine
from trackpace.models.saved_session import SavedSession
from trackpace.models.session_split import SessionSplit


# name, distance (m), pace source, value, lane, basis (m), mode
DEMO_SESSIONS = [
    ("400m repeats", 400, PaceSource.time, 72.0, 1, 100, BasisMode.fixed),
    ("800m tempo", 800, PaceSource.pace, 240.0, 1, 100, BasisMode.fixed),
    ("Mile time trial", 1609.34, PaceSource.time, 330.0, 1, 200, BasisMode.fixed),
    ("3K lane 3", 3000, PaceSource.speed, 16.5, 3, 200, BasisMode.fixed),
    ("1200m quarters", 1200, PaceSource.pace, 225.0, 2, 100, BasisMode.lap),
]


def clear_sessions(db) -> None:
    """Delete every saved session so we can reseed cleanly."""
    for row in db.query(SavedSession).all():
        db.delete(row)
    db.commit()


def seed_demo_sessions(db) -> None:
    """Insert a handful of typical track sessions with their splits."""
    rows = []
    for name, distance, source, value, lane, basis, mode in DEMO_SESSIONS:
        plan = derive_plan(
            RunParameters(
                distance_m=distance,
                source=source,
                value=value,
                lane=lane,
                basis_m=basis,
                mode=mode,
            )
        )
        session = SavedSession(
            name=name,
            distance_m=distance,
            speed_kmh=plan.speed_kmh,
            lane=lane,
            basis_m=basis,
            mode=mode.value,
            total_time_s=plan.finish_time_s,
        )
        for idx, s in enumerate(plan.splits, start=1):
            session.splits.append(
                SessionSplit(
                    idx=idx,
                    mark_m=s.mark,
                    label=s.label,
                    interval_s=s.interval,
                    running_s=s.running,
                )
            )
        rows.append(session)

    db.add_all(rows)
    db.commit()

    print(f"Seeded {len(rows)} demo sessions")


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        clear_sessions(db)
        seed_demo_sessions(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
