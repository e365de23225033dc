from pydantic import BaseModel, ConfigDict


class BaseGolfModel(BaseModel):
    """Shared configuration: immutable values, loadable by field name or alias."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)
