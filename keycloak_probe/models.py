from pydantic import BaseModel, computed_field
from typing import Optional


class ProbeResult(BaseModel):
    """
    Outcome of a single liveness probe.
    status_code is None when no response was received; error then says why.
    """
    url: str
    status_code: Optional[int] = None
    error: Optional[str] = None

    @computed_field
    @property
    def healthy(self) -> bool:
        return self.status_code == 200

    @computed_field
    @property
    def exit_code(self) -> int:
        """Process exit status for the container runtime: 0 healthy, 1 unhealthy."""
        return 0 if self.healthy else 1
