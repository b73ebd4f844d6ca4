"""
Pages of the hole: home, about, friends, guestbook and links.
"""

from __future__ import annotations

from .context import GopherContext
from .guestbook import Guestbook
from .router import HOME_LINK_TEXT, Router

BANNER = r""" _____                _   _
| ____|_   _____ _ __| |_( )___
|  _| \ \ / / _ \ '__| __|// __|
| |___ \ V /  __/ |  | |_  \__ \
|_____| \_/ \___|_|   \__| |___/

  ____             _                 _   _       _
 / ___| ___  _ __ | |__   ___ _ __  | | | | ___ | | ___
| |  _ / _ \| '_ \| '_ \ / _ \ '__| | |_| |/ _ \| |/ _ \
| |_| | (_) | |_) | | | |  __/ |    |  _  | (_) | |  __/
 \____|\___/| .__/|_| |_|\___|_|    |_| |_|\___/|_|\___|
            |_|"""

HOME_TEXT = """# Home

Welcome to my hole! Yes, 'hole' really is the word people use for a
site on the gopher protocol. I've had a Gopher site on and off for a
few times, but it's finally time to have a more permanent spot on the
smolweb.

This space is pretty empty right now, but I hope to fill it with a bit
more content over time.

## Menu:
"""

ABOUT_INTRO = """
When I just got on the internet and started making websites, I was
always fascinated by protocols. I slightly too young for Gopher's
heyday, but I remember 'gopher' be one of the things you could
specify a proxy for in early Internet Explorer, and randomly ran into
gopher:// sites back when all major browsers still had built-in
support for this.

Back in 2006 I decided to make a little gopher server with PHP and
inentd. It didn't go very far, but gopher's just kinda been in the
back of my mind ever since.
"""

ABOUT_WHY = """
Bacause it's not super easy to set up a free Gopher server due to
needing an IP address (no vhosts on gopher), I never really got around
to making a permanent site. But 20 years later in 2026, I finally have
a little homelab I can run this on.

So I decided to make a new server, this time in Python. But in the
last 20 years, my reason for making this has also changed a bit. While
originally it may just have been a novelty, now gopher feels a bit
more like a respite from the normal web that's been overrun by ads,
corporate interests, AI, misinformation and toxic short form content.

My server is open source, if you want to take a look or fork it to
make your own hole own.
"""

ABOUT_NEXT = """
So what is this going to be?

I have a blog on https://evertpot.com/ as well, but it's mostly
technical. I might use this space as a slightly more casual and
personal space, but not sure yet!
"""

FRIENDS_TEXT = """# Friends with holes

Sadly I don't have any friends yet that I can link to. Here's hoping
this changes in the future!"""

NO_ENTRIES_TEXT = "No entries yet! Sign the guestbook to be the first one!"
SOURCE_URL = "https://github.com/evert/hole"


def banner(ctx: GopherContext) -> None:
    ctx.info(BANNER)


def home(ctx: GopherContext) -> None:
    banner(ctx)
    ctx.info(HOME_TEXT)
    ctx.directory("About this hole", "/about")
    ctx.directory("Projects", "/projects")
    ctx.directory("Friends with holes", "/friends")
    ctx.directory("Interesting Gopher Sites", "/links")

    ctx.info("")
    ctx.search("Sign my guestbook", "/guestbook")
    ctx.directory("View my guestbook", "/guestbook")
    ctx.info("")
    ctx.link("My website", "https://evertpot.com/")
    ctx.link("My mastodon", "https://indieweb.social/evert")
    ctx.link("Link to source on Github", SOURCE_URL)


def about(ctx: GopherContext) -> None:
    banner(ctx)
    ctx.title("# About this hole")
    ctx.info(ABOUT_INTRO)
    ctx.link("My original Gopher server", "https://evertpot.com/100/")
    ctx.info(ABOUT_WHY)
    ctx.link("Server source on Github", SOURCE_URL)
    ctx.info(ABOUT_NEXT)
    ctx.link("My HTTP blog", "https://evertpot.com/")
    ctx.info("")
    ctx.directory(HOME_LINK_TEXT, "/")


def friends(ctx: GopherContext) -> None:
    banner(ctx)
    ctx.info(FRIENDS_TEXT)
    ctx.directory(HOME_LINK_TEXT, "/")


def links(ctx: GopherContext) -> None:
    banner(ctx)
    ctx.info("# Interesting Gopher Sites")
    ctx.link("Steven Frank's Gopher Site", "gopher://stevenf.com/")
    ctx.info("")
    ctx.directory(HOME_LINK_TEXT, "/")


def guestbook_page(book: Guestbook):
    def handler(ctx: GopherContext) -> None:
        banner(ctx)
        if ctx.query:
            ctx.info(f'Thanks for signing my guestbook, "{ctx.query}"!')
            book.sign(ctx.query)

        ctx.info("")
        ctx.info("# Guestbook\n")
        contents = book.read()
        ctx.info(NO_ENTRIES_TEXT if contents is None else contents)

        ctx.info("")
        if not ctx.query:
            ctx.search("Sign my guestbook", "/guestbook")
        ctx.directory(HOME_LINK_TEXT, "/")

    return handler


def register_pages(router: Router, book: Guestbook) -> Router:
    router.route("/", home)
    router.route("/about", about)
    router.route("/friends", friends)
    router.route("/guestbook", guestbook_page(book))
    router.route("/links", links)
    return router


__all__ = ["BANNER", "banner", "register_pages"]
