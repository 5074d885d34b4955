from pydantic import BaseModel, ConfigDict, Field


class TeamOut(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    abbr: str
    logo: str = ""


class GameIds(BaseModel):
    model_config = ConfigDict(frozen=True)

    home_id: int = 0
    away_id: int = 0
    game_id: str = ""


class PublishedGame(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    home: TeamOut
    away: TeamOut
    final: str
    recap: str = Field(default="", alias="recap_2s")
    one_stat: str = ""
    why_it_mattered: str = ""
    tags: tuple[str, ...] = ()
    ids: GameIds = Field(default_factory=GameIds)


class WhatsNextItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    when: str
    match: str
    hook: str


class DraftMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    season: int
    week: int
    scope: str
    generated_at: str
    sources: tuple[str, ...] = ()


class DraftDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    meta: DraftMeta
    top_games: tuple[PublishedGame, ...] = Field(default=(), max_length=5)
    quick_opinions: tuple[str, ...] = ()
    whats_next: tuple[WhatsNextItem, ...] = ()

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class DraftWeeksResponse(BaseModel):
    scope: str
    weeks: list[int]
    count: int
