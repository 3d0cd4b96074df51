# File: adstxt_crawler/parser/adstxt_parser.py
"""adstxt_crawler.parser.adstxt_parser: Разбор содержимого ads.txt на записи и переменные.

Формат строки записи: ``<FIELD #1>, <FIELD #2>, <FIELD #3>[, <FIELD #4>][;extension]``,
переменной: ``<VARIABLE>=<VALUE>``, комментария: ``# ...``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union


class ParseError(ValueError):
    """ads.txt parse error."""

    def __init__(self, message: str) -> None:
        super().__init__(f"ads.txt parse error: {message}")


class Relation(str, Enum):
    """FIELD #3: Type of Account/Relationship."""

    DIRECT = "DIRECT"
    RESELLER = "RESELLER"


@dataclass(frozen=True, slots=True)
class Record:
    """Строка вида ``<FIELD #1>, <FIELD #2>, <FIELD #3>, <FIELD #4>``."""

    domain: str
    account_id: str
    relation: Relation
    authority_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Variable:
    """Строка вида ``<VARIABLE>=<VALUE>``."""

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class Comment:
    text: str


@dataclass(frozen=True, slots=True)
class Blank:
    pass


@dataclass(frozen=True, slots=True)
class Unknown:
    line: str


Row = Union[Comment, Record, Variable, Blank, Unknown]


@dataclass(slots=True)
class AdsTxt:
    """Записи ads.txt и переменные (имя -> значения в порядке следования)."""

    records: List[Record] = field(default_factory=list)
    variables: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_rows(cls, rows: List[Row]) -> AdsTxt:
        result = cls()
        for row in rows:
            if isinstance(row, Record):
                result.records.append(row)
            elif isinstance(row, Variable):
                result.variables.setdefault(row.name, []).append(row.value)
        return result

    def to_dict(self) -> dict:
        return {
            "records": [
                {
                    "domain": r.domain,
                    "account_id": r.account_id,
                    "relation": r.relation.value,
                    "authority_id": r.authority_id,
                }
                for r in self.records
            ],
            "variables": self.variables,
        }


def parse_adstxt(text: str) -> AdsTxt:
    """Разбирает содержимое ads.txt и возвращает AdsTxt.

    Args:
        text: содержимое файла ads.txt.

    Returns:
        AdsTxt с записями и переменными; комментарии и нераспознанные строки отбрасываются.

    Raises:
        ParseError: если все строки пустые или нераспознанные.

    Пример:
    ```python
    from adstxt_crawler.parser.adstxt_parser import parse_adstxt

    ads = parse_adstxt("greenadexchange.com, 12345, DIRECT, d75815a79\\ncontact=adops@example.com")
    print(ads.records[0].relation, ads.variables["contact"])
    ```
    """
    return AdsTxt.from_rows(parse(text))


def parse(text: str) -> List[Row]:
    """Разбирает текст построчно; каждая строка становится одной Row.

    Строки делятся только по ``\\n`` (``\\r`` в конце строки отбрасывается);
    прочие разделители вроде ``\\x0b`` или ``\\u2028`` остаются частью строки.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        # завершающий перевод строки не даёт лишней пустой строки
        lines.pop()
    rows = [_row(line.rstrip("\r").strip()) for line in lines]
    if all(isinstance(r, (Unknown, Blank)) for r in rows):
        raise ParseError("all lines are unknown or blank")
    return rows


def _row(line: str) -> Row:
    if not line:
        return Blank()
    if line.startswith("#"):
        return Comment(line[1:].strip())

    fields = _fields(line)
    if fields is not None:
        domain, account_id, relation, authority_id = fields
        try:
            return Record(domain, account_id, Relation(relation), authority_id)
        except ValueError:
            return Unknown(line)

    variable = _variable(line)
    return variable if variable is not None else Unknown(line)


def _fields(line: str) -> Optional[Tuple[str, str, str, Optional[str]]]:
    parts = line.split(",")
    if len(parts) < 3:
        return None
    domain = parts[0].strip()
    account_id = parts[1].strip()
    # extension data after ';' is dropped
    relation = parts[2].split(";", 1)[0].strip()
    authority_id = parts[3].split(";", 1)[0].strip() if len(parts) > 3 else None
    return domain, account_id, relation, authority_id


def _variable(line: str) -> Optional[Variable]:
    index = line.find("=")
    if index <= 0:
        return None
    return Variable(line[:index], line[index + 1:])


__all__ = [
    "AdsTxt",
    "Blank",
    "Comment",
    "ParseError",
    "Record",
    "Relation",
    "Row",
    "Unknown",
    "Variable",
    "parse",
    "parse_adstxt",
]
