"""HTML help panel explaining how to subscribe to a feed."""

import html
from typing import Optional

from icalfeed.config.constants import ICAL_ICON_PATH

GOOGLE_CALENDAR_STEPS = [
    "Copy the above link by highlighting it and pressing Control-C .",
    'Log in to <a href="http://www.google.com/calendar" target="_blank">Google Calendar</a>.',
    "Once you are logged in, look on the left of the screen for 'Other calendars'. "
    "Click on the arrow box to the right of that.",
    "From the menu that appears, click 'Add by URL'.",
    "Paste in the address you copied above, and click OK.",
    "Wait a few seconds, and the calendar will now be listed under 'Other calendars'.",
    "If there isn't a colour next to the calendar, click on its name to show it. "
    "This toggles on/off this calendar in your listing, adding it any others already present.",
]

IPHONE_STEPS = [
    "Copy the above link by holding down on the link until a menu with the option "
    "'Copy' appears. Choose 'Copy'.",
    "Tap on the Settings icon from the iPhone home screen.",
    "Tap on 'Mail, Contacts, Calendars' from the list of device settings.",
    "Tap the 'Add Account' button and select 'Other' in the list of account types.",
    "Choose the 'Add Subscribed Calendar' option at the bottom of the screen.",
    "Hold down on the server field and tap 'Paste'. Tap the 'Next' button.",
    "Tap 'Save' once more to finish adding it to your iPhone.",
]

APPLE_CALENDAR_STEPS = [
    "Copy the above link by highlighting it and pressing Control-C .",
    "In Calendar, choose File > New Calendar Subscription.",
    "Paste in the address you copied above, and then click Subscribe.",
    "Enter a name for the calendar in the Name field and choose a color from the "
    "adjacent pop-up menu.",
    "Click OK.",
]

SUPPORTED_SOFTWARE = [
    "Google Calendar",
    "Microsoft Outlook",
    "Apple Calendar",
    "Thunderbird (with the Lightning extension)",
    "Evolution",
    "Yahoo! Calendar",
]


def _html_list(tag: str, items) -> str:
    html_out = f"\n<{tag}>"
    for item in items:
        html_out += f"\n\t<li>{item}</li>"
    html_out += f"\n</{tag}>"
    return html_out


def instructions_link(
    link: str,
    extra_instructions: Optional[str] = None,
    site_url: str = "",
) -> str:
    """Build the subscription instructions panel for a feed URL.

    Args:
        link: The feed URL (or site-relative path); HTML-escaped on output.
        extra_instructions: Optional raw HTML inserted after the introduction.
        site_url: Prefix shown before ``link`` in the displayed address.

    Returns:
        An HTML fragment.
    """
    html_out = ""

    html_out += (
        "\n<p>Using this iCal feed, you can add this listing to your calendar "
        "application, such as Google Calendar or Microsoft Outlook.</p>"
    )

    if extra_instructions:
        html_out += extra_instructions

    url = html.escape(link)
    shown = html.escape(site_url) + url
    html_out += '\n<div class="graybox">'
    html_out += '\n<p class="comment">Paste this URL into your calendar application:</p>'
    html_out += (
        f'\n<p><a href="{url}"><img src="{ICAL_ICON_PATH}" alt="" '
        f'style="width: 36px; height: 14px" border="0" /> &nbsp; '
        f"<strong><tt>{shown}</tt></strong></a></p>"
    )
    html_out += "\n</div>"

    html_out += "\n<h3>Google Calendar instructions</h3>"
    html_out += "\n<p>To add this in Google Calendar:</p>"
    html_out += _html_list("ol", GOOGLE_CALENDAR_STEPS)

    html_out += "\n<h3>iPhone instructions</h3>"
    html_out += _html_list("ol", IPHONE_STEPS)

    html_out += "\n<h3>Apple Calendar instructions</h3>"
    html_out += _html_list("ol", ["You should be able to subscribe just by clicking on the link above."])
    html_out += (
        '\n<p>Alternatively, Apple provide <a href="https://support.apple.com/kb/PH11523" '
        'target="_blank">full instructions</a>:</p>'
    )
    html_out += _html_list("ol", APPLE_CALENDAR_STEPS)

    html_out += "\n<h3>What software supports iCal?</h3>"
    html_out += _html_list("ul", SUPPORTED_SOFTWARE)
    html_out += "\n<h3>More information about iCal</h3>"
    html_out += (
        '\n<p>Wikipedia provides more detailed <a href="https://en.wikipedia.org/wiki/ICalendar" '
        'target="_blank">information about iCal</a>.</p>'
    )

    return html_out
