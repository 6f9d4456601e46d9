# ticketgate/ticket/routes.py
import logging

from fastapi import APIRouter, Depends, Header
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ticketgate.core.auth import IdentityVerifier, get_verifier
from ticketgate.core.config import Settings, get_settings
from ticketgate.core.database import get_db
from ticketgate.ticket import services as ticket_service
from ticketgate.ticket.schemas import TicketIssuedOut, TicketOut, TicketRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Tickets"])

SUMMARY_PAGE = """
<html>
  <body>
    <p>Total Tickets Generated: {count}</p>
  </body>
</html>
"""


@router.post("/generate-ticket", response_model=TicketIssuedOut)
def generate_ticket(
    payload: TicketRequest,
    client_id: str | None = Header(default=None, convert_underscores=False),
    client_secret: str | None = Header(default=None, convert_underscores=False),
    db: Session = Depends(get_db),
    verifier: IdentityVerifier = Depends(get_verifier),
    settings: Settings = Depends(get_settings),
):
    ticket_service.validate_identity(payload.tax_id, payload.first_name, payload.last_name)
    verifier.verify(client_id, client_secret)
    issued = ticket_service.issue_ticket(
        db,
        payload.tax_id,
        payload.first_name,
        payload.last_name,
        base_url=settings.base_url,
        cap=settings.TICKET_CAP,
    )
    return TicketIssuedOut(ticket_url=issued.url, qr_code=issued.qr_code)


@router.get("/ticket/{ticket_id}", response_model=TicketOut)
def get(ticket_id: str, db: Session = Depends(get_db)):
    return ticket_service.lookup_ticket(db, ticket_id)


@router.get("/", response_class=HTMLResponse)
def summary(db: Session = Depends(get_db)):
    try:
        stats = ticket_service.ticket_stats(db)
    except SQLAlchemyError:
        logger.exception("Error fetching ticket count")
        return PlainTextResponse("Internal server error", status_code=500)
    return HTMLResponse(SUMMARY_PAGE.format(count=stats.total_count))
