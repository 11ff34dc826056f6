translations = {
    # Header
    "brand.name": "Harmiana",
    "brand.logo_alt": "Logo Harmiana",
    "header.menu_open": "Ouvrir le menu",
    "header.menu_close": "Fermer le menu",
    "header.language": "Langue",

    # Navigation
    "nav.home": "Accueil",
    "nav.privacy": "Confidentialité",
    "nav.terms": "Conditions",
    "nav.about": "À propos",

    # Footer
    "footer.tagline": "Petit studio, mondes faits main.",
    "footer.copy": "© {year} Harmiana. Tous droits réservés.",
    "footer.contact": "Nous contacter",


    # Accueil /

    # Section principale
    "home.tagline": "Studio de jeux indépendant",
    "home.title": "Nous faisons des jeux où l’on se sent chez soi.",
    "home.subtitle": (
        "Harmiana est une petite équipe qui crée des jeux chaleureux "
        "et réfléchis, pour les joueurs qui aiment prendre leur temps."
    ),

    # Valeurs
    "home.values_title": "Ce qui compte pour nous",
    "home.values": [
        "Des jeux qui respectent votre temps",
        "Pas de pièges, pas de loot boxes",
        "Accessibles par défaut",
        "Faits avec soin, publiés quand ils sont prêts",
    ],

    # Cartes
    "home.card1.title": "Des mondes façonnés",
    "home.card1.body": "Chaque lieu est dessiné, éclairé et ajusté à la main.",
    "home.card2.title": "Un jeu apaisé",
    "home.card2.body": "Aucun chronomètre à vos trousses. Jouez à votre rythme.",
    "home.card3.title": "Pour tout le monde",
    "home.card3.body": "Texte lisible, commandes configurables et couleurs adaptées.",

    # Vitrine
    "home.showcase.title": "Nos jeux",
    "home.showcase.game1.title": "Les Lanternes d’Elm Hollow",
    "home.showcase.game1.body": "Redonnez vie à un village endormi, une lanterne à la fois.",
    "home.showcase.game1.alt": "Illustration des Lanternes d’Elm Hollow",
    "home.showcase.game2.title": "Tidewright",
    "home.showcase.game2.body": "Cartographiez un archipel à la dérive et commercez avec ses habitants.",
    "home.showcase.game2.alt": "Illustration de Tidewright",


    # Confidentialité /
    "privacy.title": "Politique de confidentialité",
    "privacy.body1": (
        "Ce site n’utilise ni cookies, ni outils d’analyse, ni traceurs, "
        "et ne collecte aucune donnée personnelle."
    ),
    "privacy.body2": (
        "Si vous nous écrivez, votre adresse e-mail sert uniquement à vous "
        "répondre et n’est jamais partagée."
    ),


    # Conditions /
    "terms.title": "Conditions d’utilisation",
    "terms.body1": (
        "Tout le contenu de ce site, illustrations et textes compris, "
        "appartient à Harmiana sauf mention contraire."
    ),
    "terms.body2": (
        "Vous pouvez partager liens et captures d’écran à des fins non "
        "commerciales, en citant le studio."
    ),


    # À propos /
    "about.title": "À propos d’Harmiana",
    "about.body1": (
        "Harmiana est née de deux amis qui prototypaient des jeux le week-end, "
        "devenus depuis un petit studio indépendant."
    ),
    "about.body2": "Nous concevons lentement, testons souvent et écoutons nos joueurs.",
    "about.beliefs_title": "Ce en quoi nous croyons",
    "about.beliefs": [
        "Les petites équipes font des jeux personnels",
        "Les joueurs méritent des prix honnêtes",
        "Un bon jeu se termine, il ne se précipite pas",
    ],


    # Page de redirection
    "redirect.title": "Redirection…",
    "redirect.body": "Si rien ne se passe, suivez ce lien :",
}
