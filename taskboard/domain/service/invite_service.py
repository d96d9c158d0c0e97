"""Invite domain service.

Covers targeted invites and resolution of any access token (invite or
share link) to the project it opens.
"""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from taskboard.config import InvitationSettings
from taskboard.domain.error import (
    InviteExpiredError,
    InviteNotPendingError,
    NotFoundError,
)
from taskboard.domain.model.access import AccessGrant, InviteGrant, ShareLinkGrant
from taskboard.domain.model.common import utcnow
from taskboard.domain.model.invite import Invite
from taskboard.domain.model.project import Project, ProjectMember
from taskboard.domain.repository import InviteRepository, ProjectRepository
from taskboard.domain.value import (
    AccessToken,
    Email,
    InviteId,
    InviteStatus,
    Role,
    UserId,
)
from taskboard.util.observability import mask_token

from .access import role_of
from .base import Service


class InviteService(Service):
    """Domain service for invite and share-link grants."""

    def __init__(
        self,
        invite_repository: InviteRepository,
        project_repository: ProjectRepository,
        invitation_settings: InvitationSettings,
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
            project_repository: Project repository
            invitation_settings: Token and expiry settings
        """
        self.invite_repository = invite_repository
        self.project_repository = project_repository
        self.invitation_settings = invitation_settings

    async def create_invite(
        self, project: Project, email: Email, invited_by: UserId
    ) -> Invite:
        """Create a pending invite for ``email``.

        Several pending invites for one address may coexist; each is
        independent.

        Args:
            project: Project to invite into
            email: Recipient address
            invited_by: Inviting user (the owner)

        Returns:
            Created invite
        """
        with logfire.span(
            "invite_service.create_invite",
            project_id=str(project.id),
            invited_by=str(invited_by),
        ):
            now = utcnow()
            invite = Invite(
                id=InviteId(uuid4()),
                email=email,
                project_id=project.id,
                token=AccessToken.generate(self.invitation_settings.token_bytes),
                invited_by=invited_by,
                status=InviteStatus.PENDING,
                expires_at=now + timedelta(days=self.invitation_settings.expiry_days),
                created_at=now,
            )

            saved = await self.invite_repository.save(invite)
            logfire.info(
                "Invite created",
                invite_id=str(saved.id),
                project_id=str(project.id),
                expires_at=saved.expires_at.isoformat() if saved.expires_at else None,
            )
            return saved

    async def get_invite(self, invite_id: InviteId) -> Invite | None:
        """Get invite by ID."""
        return await self.invite_repository.find_by_id(invite_id)

    async def list_pending_invites(self, project: Project) -> list[Invite]:
        """Pending invites of a project, newest first."""
        return await self.invite_repository.find_by_project(
            project.id, status=InviteStatus.PENDING
        )

    async def resolve_grant(self, token: AccessToken) -> AccessGrant:
        """Resolve a token to the grant it represents.

        Invites are consulted first, then live share links.

        Args:
            token: Invite or share-link token

        Returns:
            The matching grant; state is not checked here

        Raises:
            NotFoundError: If no invite or live share link matches
        """
        with logfire.span("invite_service.resolve_grant", token=mask_token(token.root)):
            invite = await self.invite_repository.find_by_token(token)
            if invite is not None:
                project = await self.project_repository.find_by_id(invite.project_id)
                if project is None:
                    logfire.warn(
                        "Invite points at missing project",
                        invite_id=str(invite.id),
                        project_id=str(invite.project_id),
                    )
                    raise NotFoundError("Invite", mask_token(token.root))
                logfire.info(
                    "Token resolved to invite",
                    invite_id=str(invite.id),
                    status=invite.status.value,
                )
                return InviteGrant(invite=invite, project=project)

            project = await self.project_repository.find_by_invite_token(token)
            if project is not None:
                logfire.info("Token resolved to share link", project_id=str(project.id))
                return ShareLinkGrant(project=project)

            logfire.warn("Token not found", token=mask_token(token.root))
            raise NotFoundError("Invite", mask_token(token.root))

    def ensure_usable(self, grant: AccessGrant, now: datetime | None = None) -> None:
        """Check that a grant can still be used.

        A share-link grant is usable by construction: it only resolves while
        its token is the live one.

        Raises:
            InviteNotPendingError: If the invite was accepted or revoked
            InviteExpiredError: If the invite is past its expiry
        """
        if not isinstance(grant, InviteGrant):
            return
        invite = grant.invite
        if invite.status != InviteStatus.PENDING:
            logfire.warn(
                "Invite not pending",
                invite_id=str(invite.id),
                status=invite.status.value,
            )
            raise InviteNotPendingError(str(invite.id))
        if invite.is_expired(now or utcnow()):
            logfire.warn("Invite expired", invite_id=str(invite.id))
            raise InviteExpiredError(str(invite.id))

    async def resolve_guest_project(self, token: AccessToken) -> Project:
        """Resolve a token for anonymous guest access.

        Raises:
            NotFoundError: If the token matches nothing
            InviteNotPendingError: If the invite was already used or revoked
            InviteExpiredError: If the invite expired
        """
        grant = await self.resolve_grant(token)
        self.ensure_usable(grant)
        return grant.project

    async def accept(self, grant: AccessGrant, user_id: UserId) -> Project:
        """Accept a usable grant on behalf of an authenticated user.

        An invite is consumed first with a conditional status transition, so
        of two concurrent acceptances exactly one succeeds. The caller then
        joins as an editor unless they already have a role.

        Args:
            grant: Resolved grant (see :meth:`ensure_usable`)
            user_id: Accepting user

        Returns:
            The project with the caller's membership

        Raises:
            InviteNotPendingError: If the invite was consumed concurrently
            NotFoundError: If the project vanished meanwhile
        """
        project = grant.project
        with logfire.span(
            "invite_service.accept",
            kind=grant.kind,
            project_id=str(project.id),
            user_id=str(user_id),
        ):
            if isinstance(grant, InviteGrant):
                accepted = await self.invite_repository.transition_status(
                    grant.invite.id,
                    InviteStatus.PENDING,
                    InviteStatus.ACCEPTED,
                    accepted_by=user_id,
                    at=utcnow(),
                )
                if accepted is None:
                    logfire.warn(
                        "Invite consumed concurrently", invite_id=str(grant.invite.id)
                    )
                    raise InviteNotPendingError(str(grant.invite.id))

            if role_of(project, user_id) is None:
                added = await self.project_repository.add_member_if_absent(
                    project.id, ProjectMember(user_id=user_id, role=Role.EDITOR)
                )
                logfire.info(
                    "Member added" if added else "Member already present",
                    project_id=str(project.id),
                    user_id=str(user_id),
                )
            else:
                logfire.info(
                    "Caller already has access",
                    project_id=str(project.id),
                    user_id=str(user_id),
                )

            updated = await self.project_repository.find_by_id(project.id)
            if updated is None:
                raise NotFoundError("Project", str(project.id))
            return updated

    async def revoke(self, invite: Invite) -> Invite:
        """Revoke a pending invite.

        Raises:
            InviteNotPendingError: If the invite is no longer pending
        """
        with logfire.span("invite_service.revoke", invite_id=str(invite.id)):
            revoked = await self.invite_repository.transition_status(
                invite.id, InviteStatus.PENDING, InviteStatus.REVOKED
            )
            if revoked is None:
                logfire.warn("Invite not pending", invite_id=str(invite.id))
                raise InviteNotPendingError(str(invite.id))
            logfire.info("Invite revoked", invite_id=str(invite.id))
            return revoked
