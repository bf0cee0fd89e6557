"""Contact form endpoints: public submission plus admin follow-up."""
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, Request, status

from bureau.interfaces.http.deps import (
    client_ip,
    enforce_contact_rate_limit,
    get_contact_mailer,
    get_contact_service,
    get_current_admin,
)
from bureau.modules.accounts import Account
from bureau.modules.contacts import (
    ContactMailer,
    ContactNotFoundError,
    ContactService,
    ContactSubmission,
    DuplicateSubmissionError,
)
from bureau.schemas import (
    ContactCreate,
    ContactListData,
    ContactReceipt,
    ContactResponse,
    ContactStatsResponse,
    ContactStatus,
    ContactStatusUpdate,
    Envelope,
    Pagination,
)

router = APIRouter()


@router.post(
    "",
    response_model=Envelope[ContactReceipt],
    status_code=status.HTTP_201_CREATED,
    summary="Submit the contact form",
    dependencies=[Depends(enforce_contact_rate_limit)],
)
async def submit_contact(
    payload: ContactCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    service: ContactService = Depends(get_contact_service),
    mailer: ContactMailer = Depends(get_contact_mailer),
):
    try:
        contact = await service.submit(
            ContactSubmission(**payload.model_dump()),
            ip_address=client_ip(request),
            user_agent=request.headers.get("user-agent"),
        )
    except DuplicateSubmissionError as exc:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="You have already submitted a contact form recently. Please wait before submitting again.",
        ) from exc

    background_tasks.add_task(mailer.deliver_submission_emails, contact)
    return Envelope[ContactReceipt](
        message="Thank you for your message! We'll get back to you within 24 hours.",
        data=ContactReceipt(id=contact.id, submitted_at=contact.created_at),
    )


@router.get("", response_model=Envelope[ContactListData], summary="List contact submissions")
async def list_contacts(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    status_filter: Optional[ContactStatus] = Query(None, alias="status"),
    _: Account = Depends(get_current_admin),
    service: ContactService = Depends(get_contact_service),
):
    result = await service.list_contacts(page=page, limit=limit, status=status_filter)
    return Envelope[ContactListData](
        data=ContactListData(
            contacts=[ContactResponse.model_validate(contact) for contact in result.contacts],
            pagination=Pagination(page=result.page, limit=result.limit, total=result.total, pages=result.pages),
        )
    )


@router.get("/stats", response_model=Envelope[ContactStatsResponse], summary="Contact statistics")
async def contact_stats(
    _: Account = Depends(get_current_admin),
    service: ContactService = Depends(get_contact_service),
):
    stats = await service.stats()
    return Envelope[ContactStatsResponse](
        data=ContactStatsResponse(total=stats.total, this_month=stats.this_month, by_status=stats.by_status)
    )


@router.put("/{contact_id}/status", response_model=Envelope[ContactResponse], summary="Update contact status")
async def update_contact_status(
    contact_id: str,
    payload: ContactStatusUpdate,
    _: Account = Depends(get_current_admin),
    service: ContactService = Depends(get_contact_service),
):
    try:
        contact = await service.update_status(contact_id, status=payload.status, notes=payload.notes)
    except ContactNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found") from exc
    return Envelope[ContactResponse](data=ContactResponse.model_validate(contact))
