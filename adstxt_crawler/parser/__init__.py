"""adstxt_crawler.parser: Разбор ads.txt для последующей обработки сохранённых файлов."""

from .adstxt_parser import AdsTxt, ParseError, Record, Relation, Variable, parse, parse_adstxt

__all__ = ["AdsTxt", "ParseError", "Record", "Relation", "Variable", "parse", "parse_adstxt"]
