"""
Base commune des modeles de reponses des sources externes.

Les API tierces omettent ou mettent a null des champs de facon imprevisible :
les valeurs null sont ignorees pour laisser s'appliquer les valeurs par defaut,
et les champs inconnus sont ignores.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class WireModel(BaseModel):
    """Modele tolerant pour les payloads JSON des sources externes."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
