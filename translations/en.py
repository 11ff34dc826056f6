translations = {
    # Header
    "brand.name": "Harmiana",
    "brand.logo_alt": "Harmiana logo",
    "header.menu_open": "Open menu",
    "header.menu_close": "Close menu",
    "header.language": "Language",

    # Navigation
    "nav.home": "Home",
    "nav.privacy": "Privacy",
    "nav.terms": "Terms",
    "nav.about": "About",

    # Footer
    "footer.tagline": "Small studio, handcrafted worlds.",
    "footer.copy": "© {year} Harmiana. All rights reserved.",
    "footer.contact": "Contact us",


    # Home /

    # Hero section
    "home.tagline": "Independent game studio",
    "home.title": "We make games that feel like home.",
    "home.subtitle": (
        "Harmiana is a small team building cozy, thoughtful games "
        "for players who like to take their time."
    ),

    # Values
    "home.values_title": "What we care about",
    "home.values": [
        "Games that respect your time",
        "No dark patterns, no loot boxes",
        "Accessible by default",
        "Made with care, shipped when ready",
    ],

    # Cards
    "home.card1.title": "Crafted worlds",
    "home.card1.body": "Every place we build is drawn, lit and tuned by hand.",
    "home.card2.title": "Calm play",
    "home.card2.body": "No timers chasing you. Play at your own pace.",
    "home.card3.title": "For everyone",
    "home.card3.body": "Clear text, remappable controls and colour-safe palettes.",

    # Showcase
    "home.showcase.title": "Our games",
    "home.showcase.game1.title": "Lanterns of Elm Hollow",
    "home.showcase.game1.body": "Restore a sleepy village one lantern at a time.",
    "home.showcase.game1.alt": "Lanterns of Elm Hollow key art",
    "home.showcase.game2.title": "Tidewright",
    "home.showcase.game2.body": "Chart a drifting archipelago and trade with its islanders.",
    "home.showcase.game2.alt": "Tidewright key art",


    # Privacy /
    "privacy.title": "Privacy policy",
    "privacy.body1": (
        "This website does not use cookies, analytics or trackers, "
        "and it does not collect personal data."
    ),
    "privacy.body2": (
        "If you write to us, we only use your email address to reply "
        "and we never share it."
    ),


    # Terms /
    "terms.title": "Terms of use",
    "terms.body1": (
        "All content on this website, including artwork and text, "
        "belongs to Harmiana unless stated otherwise."
    ),
    "terms.body2": (
        "You may share links and screenshots for non-commercial purposes "
        "as long as you credit the studio."
    ),


    # About /
    "about.title": "About Harmiana",
    "about.body1": (
        "Harmiana started as two friends prototyping games on weekends "
        "and grew into a small independent studio."
    ),
    "about.body2": "We design slowly, test often and listen to our players.",
    "about.beliefs_title": "What we believe",
    "about.beliefs": [
        "Small teams make personal games",
        "Players deserve honest pricing",
        "Good games are finished, not rushed",
    ],


    # Redirect page
    "redirect.title": "Redirecting…",
    "redirect.body": "If nothing happens, follow this link:",
}
