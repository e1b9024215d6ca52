import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from trackpace.api.calculator import plan_from_request, split_rows
from trackpace.core.share import share_text
from trackpace.core.splits import FixedSplit, LapSplit
from trackpace.core.time_utils import format_time_with_ms
from trackpace.db import get_db
from trackpace.models.saved_session import SavedSession
from trackpace.models.session_split import SessionSplit
from trackpace.schemas.session import (
    SessionBulkDelete,
    SessionCreate,
    SessionRead,
    SessionRename,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


def date_label(session: SavedSession) -> str:
    # e.g. "Oct 19, 2026 07:05:12"
    return session.created_at.strftime("%b %d, %Y %H:%M:%S")


def _to_read(session: SavedSession) -> SessionRead:
    splits = [
        {
            "idx": s.idx,
            "mark_m": s.mark_m,
            "label": s.label,
            "interval_s": s.interval_s,
            "running_s": s.running_s,
            "running": format_time_with_ms(s.running_s),
        }
        for s in session.splits
    ]
    return SessionRead(
        id=session.id,
        name=session.name,
        created_at=session.created_at,
        distance_m=session.distance_m,
        speed_kmh=session.speed_kmh,
        lane=session.lane,
        basis_m=session.basis_m,
        mode=session.mode,
        total_time_s=session.total_time_s,
        total_time=format_time_with_ms(session.total_time_s),
        splits=splits,
    )


def _matches(session: SavedSession, q: str) -> bool:
    """Search by name, distance or date, case-insensitive."""
    q = q.lower()
    return (
        q in session.name.lower()
        or q in f"{session.distance_m:g}"
        or q in date_label(session).lower()
        or q in session.created_at.date().isoformat()
    )


def _get_or_404(db: Session, session_id: int) -> SavedSession:
    row = db.query(SavedSession).filter(SavedSession.id == session_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Session not found")
    return row


@router.post("", response_model=SessionRead)
def create_session(payload: SessionCreate, db: Session = Depends(get_db)):
    plan = plan_from_request(payload)
    params = plan.parameters

    name = (payload.name or "").strip() or f"Session {params.distance_m:g}m"
    session = SavedSession(
        name=name,
        distance_m=params.distance_m,
        speed_kmh=plan.speed_kmh,
        lane=params.lane,
        basis_m=params.basis_m,
        mode=params.mode.value,
        total_time_s=plan.finish_time_s,
    )
    for row in split_rows(plan.splits):
        session.splits.append(
            SessionSplit(
                idx=row.idx,
                mark_m=row.mark_m,
                label=row.label,
                interval_s=row.interval_s,
                running_s=row.running_s,
            )
        )

    db.add(session)
    db.commit()
    db.refresh(session)
    logger.info("saved session %d (%s, %d splits)", session.id, session.name, len(session.splits))
    return _to_read(session)


@router.get("", response_model=list[SessionRead])
def list_sessions(
    q: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    List saved sessions, most recent first, optionally filtered by `q`.

      GET /sessions?q=800
    """
    rows = (
        db.query(SavedSession)
        .order_by(SavedSession.created_at.desc(), SavedSession.id.desc())
        .all()
    )
    if q:
        rows = [r for r in rows if _matches(r, q.strip())]
    return [_to_read(r) for r in rows]


@router.get("/{session_id}", response_model=SessionRead)
def get_session(session_id: int, db: Session = Depends(get_db)):
    return _to_read(_get_or_404(db, session_id))


@router.patch("/{session_id}", response_model=SessionRead)
def rename_session(session_id: int, payload: SessionRename, db: Session = Depends(get_db)):
    session = _get_or_404(db, session_id)
    session.name = payload.name
    db.commit()
    db.refresh(session)
    return _to_read(session)


@router.get("/{session_id}/share", response_class=PlainTextResponse)
def share_session(session_id: int, db: Session = Depends(get_db)):
    session = _get_or_404(db, session_id)
    rows = [
        LapSplit(s.mark_m, s.interval_s, s.running_s, s.label)
        if s.label
        else FixedSplit(s.mark_m, s.interval_s, s.running_s)
        for s in session.splits
    ]
    return share_text(
        session.name,
        session.distance_m,
        session.speed_kmh,
        session.lane,
        rows,
        date_label=date_label(session),
    )


@router.delete("/{session_id}")
def delete_session(session_id: int, db: Session = Depends(get_db)):
    session = _get_or_404(db, session_id)
    db.delete(session)
    db.commit()
    logger.info("deleted session %d", session_id)
    return {"message": "Session deleted"}


@router.post("/bulk_delete")
def bulk_delete_sessions(payload: SessionBulkDelete, db: Session = Depends(get_db)):
    rows = db.query(SavedSession).filter(SavedSession.id.in_(payload.ids)).all()
    for row in rows:
        db.delete(row)
    db.commit()
    logger.info("bulk deleted %d sessions", len(rows))
    return {"message": "Sessions deleted", "deleted": len(rows)}


@router.delete("")
def clear_sessions(db: Session = Depends(get_db)):
    rows = db.query(SavedSession).all()
    for row in rows:
        db.delete(row)
    db.commit()
    logger.info("cleared history (%d sessions)", len(rows))
    return {"message": "History cleared", "deleted": len(rows)}
