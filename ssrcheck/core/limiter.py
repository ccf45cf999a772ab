"""SlowAPI rate limiter singleton.

Remote checks fan out into many GitHub API calls, so /check-repo is
limited per client address. The limit string comes from
`Settings.check_rate_limit` and is applied in the router:

    @router.get("/check-repo")
    @limiter.limit(lambda: get_settings().check_rate_limit)
    async def check_repo(request: Request, ...):
        ...

The `Request` parameter is required by SlowAPI even if the handler doesn't
use it directly; SlowAPI uses it to extract the key.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address, default_limits=[])
