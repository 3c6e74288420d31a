"""Shared HTML fixtures shaped like rendered Goodreads pages."""
import pytest


DETAIL_HTML = """
<html>
<head><title>Dracula by Bram Stoker | Goodreads</title></head>
<body>
<div class="BookPage__leftColumn">
  <div class="BookCover__image">
    <div class="BookCover"><img class="ResponsiveImage" src="https://images.gr-assets.com/books/dracula.jpg" alt="Dracula"></div>
  </div>
</div>
<div class="BookPage__mainContent">
  <div class="BookPageTitleSection">
    <div class="BookPageTitleSection__title">
      <h3 class="Text Text__title3 Text__italic Text__regular Text__subdued"><a href="https://www.goodreads.com/series/1">Dracula #1</a></h3>
      <h1 class="Text Text__title1" data-testid="bookTitle" aria-label="Book title: Dracula">Dracula</h1>
    </div>
  </div>
  <div class="BookPageMetadataSection">
    <div class="ContributorLinksList">
      <span><a class="ContributorLink" href="/author/show/6988"><span class="ContributorLink__name" data-testid="name">Bram
        Stoker</span></a></span>
      <span><a class="ContributorLink" href="/author/show/17"><span class="ContributorLink__name" data-testid="name">Nina Auerbach</span></a></span>
    </div>
    <div class="RatingStatistics">
      <div class="RatingStatistics__column"><div class="RatingStatistics__rating" aria-hidden="true">4.02</div></div>
      <div class="RatingStatistics__meta">
        <span data-testid="ratingsCount">55,061<span>&nbsp;ratings</span></span><span aria-hidden="true"> · </span><span data-testid="reviewsCount">3,210<span>&nbsp;reviews</span></span>
      </div>
    </div>
    <div class="BookPageMetadataSection__description">
      <div class="TruncatedContent">
        <div class="TruncatedContent__text TruncatedContent__text--large"><span class="Formatted">Jonathan Harker travels to
          Transylvania.</span></div>
      </div>
    </div>
    <div class="BookPageMetadataSection__genres">
      <ul class="CollapsableList">
        <span class="BookPageMetadataSection__genreButton"><a class="Button Button--tag-inline" href="/genres/horror"><span class="Button__labelItem">Horror</span></a></span>
        <span class="BookPageMetadataSection__genreButton"><a class="Button Button--tag-inline" href="/genres/fiction"><span class="Button__labelItem">Fiction</span></a></span>
        <button class="Button Button--tag-inline" type="button"><span class="Button__labelItem">...show all</span></button>
      </ul>
    </div>
    <div class="FeaturedDetails">
      <p data-testid="pagesFormat">488 pages, Paperback</p>
      <p data-testid="publicationInfo">First published May 26, 1897</p>
    </div>
    <div class="EditionDetails">
      <dl>
        <div class="DescListItem"><dt>Format</dt><dd><div class="TruncatedContent"><div class="TruncatedContent__text">488 pages, Paperback</div></div></dd></div>
        <div class="DescListItem"><dt>Published</dt><dd>January 1, 2003 by Penguin Classics</dd></div>
        <div class="DescListItem"><dt>ISBN</dt><dd>9780141439846<span class="Text Text__subdued">(ISBN10: 0141439843)</span></dd></div>
        <div class="DescListItem"><dt>ASIN</dt><dd> B000FC0PBC </dd></div>
        <div class="DescListItem"><dt>Language</dt><dd>English</dd></div>
      </dl>
    </div>
    <div class="WorkDetails">
      <dl>
        <div class="DescListItem"><dt>Original title</dt><dd>Dracula</dd></div>
        <div class="DescListItem"><dt>Setting</dt><dd><div class="TruncatedContent"><div class="TruncatedContent__text"><span><a href="/places/1">London, England</a> (United Kingdom)</span>, <span><a href="/places/2">Transylvania</a></span>, <span><a href="/places/1">London, England</a> (United Kingdom)</span></div><button><span class="Button__labelItem">...more</span></button></div></dd></div>
      </dl>
    </div>
  </div>
</div>
</body>
</html>
"""


SEARCH_HTML = """
<html>
<body>
<table class="tableList">
  <tr itemscope itemtype="http://schema.org/Book">
    <td width="5%" valign="top"><a title="The Hobbit" href="/book/show/5907.The_Hobbit?from_search=true"><img class="bookCover" src="hobbit.jpg"></a></td>
    <td width="100%" valign="top">
      <a class="bookTitle" itemprop="url" href="/book/show/5907.The_Hobbit?from_search=true&amp;from_srp=true">
        <span itemprop="name" role="heading" aria-level="4">The Hobbit, or There and Back Again</span>
      </a>
      <br>
      <span class="by">by</span>
      <span itemprop="author" itemscope itemtype="http://schema.org/Person">
        <div class="authorName__container"><a class="authorName" itemprop="url" href="/author/show/656983"><span itemprop="name">J.R.R. Tolkien</span></a></div>
      </span>
      <div>
        <span class="greyText smallText uitext">
          <span class="minirating"><span class="stars staticStars"></span> 4.29 avg rating &mdash; 4,123,456 ratings</span>
          &mdash; published 1937 &mdash; 50 editions
        </span>
      </div>
    </td>
  </tr>
  <tr itemscope itemtype="http://schema.org/Book">
    <td width="5%" valign="top"><a title="Good Omens" href="/book/show/12067.Good_Omens"><img class="bookCover" src="omens.jpg"></a></td>
    <td width="100%" valign="top">
      <a class="bookTitle" itemprop="url" href="/book/show/12067.Good_Omens?from_search=true">
        <span itemprop="name" role="heading" aria-level="4">Good Omens</span>
      </a>
      <br>
      <span class="by">by</span>
      <span itemprop="author" itemscope itemtype="http://schema.org/Person">
        <div class="authorName__container"><a class="authorName" itemprop="url" href="/author/show/1654"><span itemprop="name">Terry Pratchett</span></a>,</div>
        <div class="authorName__container"><a class="authorName" itemprop="url" href="/author/show/1221698"><span itemprop="name">Neil Gaiman</span></a></div>
      </span>
      <div>
        <span class="greyText smallText uitext">
          <span class="minirating"><span class="stars staticStars"></span> 4.25 avg rating &mdash; 812,345 ratings</span>
          &mdash; published 1990 &mdash; 274 editions
        </span>
      </div>
    </td>
  </tr>
</table>
</body>
</html>
"""


@pytest.fixture
def detail_html():
    return DETAIL_HTML


@pytest.fixture
def search_html():
    return SEARCH_HTML
