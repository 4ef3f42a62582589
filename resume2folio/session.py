"""
Editor session state as an explicit state-transition reducer.

``reduce(state, action)`` never mutates its input; the front end keeps the
latest AppState and replaces it with whatever the reducer returns.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from resume2folio import config
from resume2folio.confidence import score
from resume2folio.schema_resume import AdvancedParsedData, GeneratedPortfolio, ParsedData, ThemeSettings

logger = logging.getLogger(__name__)


def default_theme() -> ThemeSettings:
    return ThemeSettings(color=config.DEFAULT_COLOR, font=config.DEFAULT_FONT,
                         template=config.DEFAULT_TEMPLATE)


class AppState(BaseModel):
    model_config = ConfigDict(frozen=True)

    parsed_data: Optional[ParsedData] = None
    resume_data: Optional[ParsedData] = None
    raw_text: str = ""
    theme: ThemeSettings = Field(default_factory=default_theme)
    generated: Optional[GeneratedPortfolio] = None
    is_loading: bool = False


# ───────────────────────────────────────── actions ──
class SetParsedData(BaseModel):
    data: ParsedData
    raw_text: str = ""


class UpdateResumeData(BaseModel):
    changes: Dict[str, Any]


class SetThemeSettings(BaseModel):
    theme: ThemeSettings


class SetGeneratedPortfolio(BaseModel):
    portfolio: Optional[GeneratedPortfolio]


class SetLoading(BaseModel):
    loading: bool


class ResetState(BaseModel):
    pass


Action = Union[SetParsedData, UpdateResumeData, SetThemeSettings, SetGeneratedPortfolio, SetLoading, ResetState]


def reduce(state: AppState, action: Action) -> AppState:
    if isinstance(action, SetParsedData):
        return state.model_copy(update={
            "parsed_data": action.data,
            "resume_data": action.data.model_copy(deep=True),
            "raw_text": action.raw_text,
            "generated": None,
        })
    if isinstance(action, UpdateResumeData):
        return state.model_copy(update={"resume_data": _apply_edits(state.resume_data, action.changes, state.raw_text)})
    if isinstance(action, SetThemeSettings):
        return state.model_copy(update={"theme": action.theme})
    if isinstance(action, SetGeneratedPortfolio):
        return state.model_copy(update={"generated": action.portfolio})
    if isinstance(action, SetLoading):
        return state.model_copy(update={"is_loading": action.loading})
    if isinstance(action, ResetState):
        return AppState()
    logger.warning("Ignoring unknown action %r", type(action).__name__)
    return state


def _apply_edits(current: Optional[ParsedData], changes: Dict[str, Any], raw_text: str = "") -> ParsedData:
    """
    Merge edited fields; an edited field no longer counts as a fallback value.
    Advanced data is re-scored so its confidence describes the edited values.
    """
    if current is None:
        raise ValueError("No résumé data to edit; parse a document first")
    unknown = set(changes) - set(type(current).model_fields)
    if unknown:
        raise ValueError(f"Unknown résumé field(s): {', '.join(sorted(unknown))}")

    merged = current.model_dump()
    merged.update(changes)
    if current.fallback_fields is not None:
        merged["fallback_fields"] = set(current.fallback_fields) - set(changes)
    # validate the edited values against the model
    result = type(current).model_validate(merged)
    if isinstance(result, AdvancedParsedData) and "confidence" not in changes:
        result.confidence = score(result, raw_text)
    return result
