"""Actor authorization shared by permission administration use cases."""

from gatekeeper.application.ports import AccessChecker
from gatekeeper.domain.exceptions import PermissionDenied, PersistenceFailure
from gatekeeper.domain.value_objects import DecisionOutcome, Principal, SystemPermission


async def _require(access_checker: AccessChecker, actor: Principal, code: str, message: str) -> None:
    decision = await access_checker.require_permission(actor.user_id, actor.role, code)
    if decision.outcome is DecisionOutcome.UNDETERMINED:
        raise PersistenceFailure(decision.reason or "Permission storage unavailable")
    if not decision.allowed:
        raise PermissionDenied(message)


async def ensure_can_manage(access_checker: AccessChecker, actor: Principal) -> None:
    """Raise PermissionDenied unless actor holds permissions.manage.

    PersistenceFailure is raised when the actor's permissions cannot be read.
    """
    await _require(
        access_checker,
        actor,
        SystemPermission.PERMISSIONS_MANAGE,
        "User does not have permission to manage permissions",
    )


async def ensure_can_view_user(access_checker: AccessChecker, actor: Principal, user_id: int) -> None:
    """Users may always view themselves; anyone else needs users.view."""
    if actor.user_id == user_id:
        return
    await _require(
        access_checker,
        actor,
        SystemPermission.USERS_VIEW,
        "You do not have permission to view this user's permissions",
    )
