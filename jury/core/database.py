"""SQLite persistence for event options and imported records.

Two stores share one database file:
  - OptionsStore: the single options row (next table number + version)
  - RecordStore: judges and projects saved after an import, read back for export
"""

import json
import logging
import sqlite3

from .errors import StaleOptionsError
from .models import Judge, Options, Project


logger = logging.getLogger(__name__)


class OptionsStore:
    """Options row with compare-and-swap writes on ``version``.

    Imports run read-modify-write over ``next_table_num``.  Passing the
    version that was read to ``update_next_table_num`` makes a concurrent
    import fail with StaleOptionsError instead of handing out duplicate
    tables.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        conn = sqlite3.connect(self.db_path)
        conn.execute('''CREATE TABLE IF NOT EXISTS options (
            id INTEGER PRIMARY KEY CHECK (id = 1),
            next_table_num INTEGER NOT NULL DEFAULT 0,
            version INTEGER NOT NULL DEFAULT 0
        )''')
        conn.execute('INSERT OR IGNORE INTO options (id) VALUES (1)')
        conn.commit()
        conn.close()

    def get_options(self) -> Options:
        conn = sqlite3.connect(self.db_path)
        cur = conn.cursor()
        cur.execute('SELECT next_table_num, version FROM options WHERE id = 1')
        next_table_num, version = cur.fetchone()
        conn.close()
        return Options(next_table_num=next_table_num, version=version)

    def update_next_table_num(self, value: int, expected_version: int | None = None):
        """Replace the stored counter.

        With expected_version set, the write only lands if nobody else has
        written since that version was read.
        """
        conn = sqlite3.connect(self.db_path)
        cur = conn.cursor()
        if expected_version is None:
            cur.execute('''UPDATE options SET next_table_num = ?, version = version + 1
                           WHERE id = 1''', (value,))
        else:
            cur.execute('''UPDATE options SET next_table_num = ?, version = version + 1
                           WHERE id = 1 AND version = ?''', (value, expected_version))
            if cur.rowcount == 0:
                cur.execute('SELECT version FROM options WHERE id = 1')
                actual = cur.fetchone()[0]
                conn.close()
                logger.warning('Stale options write: expected version %d, found %d',
                               expected_version, actual)
                raise StaleOptionsError(expected_version, actual)
        conn.commit()
        conn.close()
        logger.info('next_table_num set to %d', value)


class RecordStore:
    """Saved judges and projects."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        conn = sqlite3.connect(self.db_path)
        cur = conn.cursor()
        cur.execute('''CREATE TABLE IF NOT EXISTS judges (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT,
            email TEXT,
            notes TEXT,
            code TEXT,
            active INTEGER,
            read_welcome INTEGER,
            alpha REAL,
            beta REAL,
            last_activity INTEGER
        )''')
        cur.execute('''CREATE TABLE IF NOT EXISTS projects (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT,
            location INTEGER,
            description TEXT,
            url TEXT,
            try_link TEXT,
            video_link TEXT,
            locality INTEGER,
            challenge_list TEXT,
            mu REAL,
            sigma_sq REAL,
            active INTEGER,
            last_activity INTEGER
        )''')
        conn.commit()
        conn.close()

    def save_judges(self, judges: list[Judge]):
        conn = sqlite3.connect(self.db_path)
        cur = conn.cursor()
        for j in judges:
            cur.execute('''INSERT INTO judges
                (name, email, notes, code, active, read_welcome, alpha, beta, last_activity)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)''',
                (j.name, j.email, j.notes, j.code, int(j.active), int(j.read_welcome),
                 j.alpha, j.beta, j.last_activity))
        conn.commit()
        conn.close()

    def save_projects(self, projects: list[Project]):
        conn = sqlite3.connect(self.db_path)
        cur = conn.cursor()
        for p in projects:
            cur.execute('''INSERT INTO projects
                (name, location, description, url, try_link, video_link, locality,
                 challenge_list, mu, sigma_sq, active, last_activity)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)''',
                (p.name, p.location, p.description, p.url, p.try_link, p.video_link,
                 p.locality, json.dumps(p.challenge_list), p.mu, p.sigma_sq,
                 int(p.active), p.last_activity))
        conn.commit()
        conn.close()

    def load_judges(self) -> list[Judge]:
        conn = sqlite3.connect(self.db_path)
        cur = conn.cursor()
        cur.execute('''SELECT name, email, notes, code, active, read_welcome,
                              alpha, beta, last_activity
                       FROM judges ORDER BY id''')
        judges = [
            Judge(name=name, email=email, notes=notes, code=code,
                  active=bool(active), read_welcome=bool(read_welcome),
                  alpha=alpha, beta=beta, last_activity=last_activity)
            for name, email, notes, code, active, read_welcome, alpha, beta, last_activity
            in cur.fetchall()
        ]
        conn.close()
        return judges

    def load_projects(self) -> list[Project]:
        conn = sqlite3.connect(self.db_path)
        cur = conn.cursor()
        cur.execute('''SELECT name, location, description, url, try_link, video_link,
                              locality, challenge_list, mu, sigma_sq, active, last_activity
                       FROM projects ORDER BY location, id''')
        projects = []
        for row in cur.fetchall():
            (name, location, description, url, try_link, video_link,
             locality, challenge_list, mu, sigma_sq, active, last_activity) = row
            projects.append(Project(
                name=name,
                location=location,
                description=description,
                url=url,
                try_link=try_link,
                video_link=video_link,
                locality=locality,
                challenge_list=json.loads(challenge_list) if challenge_list else [],
                mu=mu,
                sigma_sq=sigma_sq,
                active=bool(active),
                last_activity=last_activity,
            ))
        conn.close()
        return projects
