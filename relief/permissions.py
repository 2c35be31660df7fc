from functools import wraps

from django.conf import settings
from django.contrib.auth.views import redirect_to_login

SESSION_FLAG = 'mmi_admin'


def check_credentials(username: str, password: str) -> bool:
    # Soft gate only: a fixed pair from settings, no hashing or lockout
    return username == settings.MMI_ADMIN_USERNAME and password == settings.MMI_ADMIN_PASSWORD


def is_admin(request) -> bool:
    try:
        return bool(request.session.get(SESSION_FLAG, False))
    except AttributeError:
        return False


def grant_admin(request):
    request.session[SESSION_FLAG] = True


def revoke_admin(request):
    request.session.pop(SESSION_FLAG, None)


def admin_required(view_func):
    """Send visitors without the admin session flag to the login page."""
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not is_admin(request):
            return redirect_to_login(request.get_full_path(), login_url="relief:login")
        return view_func(request, *args, **kwargs)
    return _wrapped
