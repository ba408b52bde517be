"""
News brief extraction for the front page and the news archive.
"""

from __future__ import annotations

from typing import List

from ..exceptions import StructureMissingError
from .fields import required_attr, required_text
from .models import ArticleBrief, MainPageArticleBriefs
from .query import Query, TreeNode
from .sections import collect_blocks

NEWS_BLOCK = Query("h2.newsheader+div.standard-box")
NEWS_LINK = Query("a")
NEWS_NAME = Query("div.newstext")
NEWS_WHEN = Query("div.newstc>div.newsrecent")
NEWS_COMMENTS = Query("div.newstc>div.newsrecent+div")


def build_article_brief(node: TreeNode) -> ArticleBrief:
    """Build one brief from a news link (``<a class="newsline">``) node."""
    path = required_attr(node, None, "href", "article.path", "Cannot find href for news brief")
    name = required_text(node, NEWS_NAME, "article.name", "Cannot find name for news brief")
    when = required_text(node, NEWS_WHEN, "article.when", "Cannot find 'when' for news brief")
    comments_num = required_text(node, NEWS_COMMENTS, "article.comments_num", "Cannot find comments for news brief")
    return ArticleBrief(name=name, path=path, when=when, comments_num=comments_num)


def _news_blocks(document: TreeNode) -> List[List[ArticleBrief]]:
    return collect_blocks(document, NEWS_BLOCK, NEWS_LINK, build_article_brief)


def parse_latest_news(document: TreeNode) -> MainPageArticleBriefs:
    """Front page news: first block is today, second is yesterday, the rest is older."""
    blocks = iter(_news_blocks(document))
    today = next(blocks, None)
    if today is None:
        raise StructureMissingError("news.today", "Not todays news")
    yesterday = next(blocks, None)
    if yesterday is None:
        raise StructureMissingError("news.yesterday", "Not yesterdays news")
    older = [brief for block in blocks for brief in block]
    return MainPageArticleBriefs(today=tuple(today), yesterday=tuple(yesterday), older=tuple(older))


def parse_archived_news(document: TreeNode) -> List[ArticleBrief]:
    """Briefs of the first news block on an archive page."""
    blocks = _news_blocks(document)
    if not blocks:
        raise StructureMissingError("news.archive", "Not archived news")
    return blocks[0]
