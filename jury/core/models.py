"""Data models for the judging system's CSV import and export."""

import secrets
from dataclasses import dataclass, field


# CrowdBT priors for newly created judges and projects
ALPHA_PRIOR = 10.0
BETA_PRIOR = 1.0
MU_PRIOR = 0.0
SIGMA_SQ_PRIOR = 1.0


@dataclass
class ImportConfig:
    """Configuration for a single CSV run."""
    source_type: str          # "judge", "project", "devpost"
    has_header: bool = False  # First row is a header (always true for devpost)
    db_path: str = ''         # SQLite file holding options and saved records
    output_dir: str = '.'     # Where exports are written


@dataclass
class Options:
    """Persisted event options: the next table number to hand out."""
    next_table_num: int = 0
    version: int = 0          # Bumped on every write, used for compare-and-swap


@dataclass
class Judge:
    name: str
    email: str
    notes: str
    code: str = ''
    active: bool = True
    read_welcome: bool = False
    alpha: float = ALPHA_PRIOR
    beta: float = BETA_PRIOR
    last_activity: int = 0    # Epoch millis


@dataclass
class Project:
    name: str
    location: int
    description: str
    url: str
    try_link: str = ''
    video_link: str = ''
    locality: int = 0
    challenge_list: list = field(default_factory=list)
    mu: float = MU_PRIOR
    sigma_sq: float = SIGMA_SQ_PRIOR
    active: bool = True
    last_activity: int = 0


def gen_judge_code() -> str:
    """Random 6-digit login code."""
    return f'{secrets.randbelow(1_000_000):06d}'


def new_judge(name: str, email: str, notes: str) -> Judge:
    return Judge(name=name, email=email, notes=notes, code=gen_judge_code())


def new_project(name: str, table: int, description: str, url: str,
                try_link: str, video_link: str, locality: int,
                challenge_list: list) -> Project:
    return Project(
        name=name,
        location=table,
        description=description,
        url=url,
        try_link=try_link,
        video_link=video_link,
        locality=locality,
        challenge_list=list(challenge_list),
    )
