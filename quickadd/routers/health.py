from fastapi import APIRouter, Depends

from ..deps import get_clock
from ..utils.clock import Clock

router = APIRouter()


@router.get("")
def health(clock: Clock = Depends(get_clock)):
    return {"ok": True, "now": clock().isoformat()}
