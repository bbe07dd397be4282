# Content served before anything has been saved from the admin panel.
import copy

DEFAULT_PAGE_CONTENT = {
    "_id": "singleton-content",
    "navHome": "Home",
    "navServices": "Diensten",
    "navBeforeAfter": "Voor & Na",
    "navGallery": "Galerij",
    "navContact": "Contact",
    "companyName": "Andries Service+",
    "heroTitle": "Uw tuin, onze passie.",
    "heroTagline": "Professioneel onderhoud voor een onberispelijke tuin.",
    "heroButtonText": "Vraag Offerte Aan",
    "servicesTitle": "Onze Diensten",
    "servicesSubtitle": "Wij bieden een breed scala aan diensten om uw tuin en woning in topconditie te houden.",
    "servicesList": [],
    "beforeAfterTitle": "Voor & Na",
    "beforeAfterSubtitle": "Zie het verschil dat professioneel onderhoud maakt.",
    "servicesCtaTitle": "Bekijk Ons Werk",
    "servicesCtaSubtitle": "Een foto zegt meer dan duizend woorden. Ontdek onze projecten in de galerij.",
    "servicesCtaButtonText": "Open Galerij",
    "galleryTitle": "Galerij",
    "gallerySubtitle": "Een selectie van onze voltooide projecten.",
    "contactTitle": "Neem Contact Op",
    "contactSubtitle": "Heeft u vragen of wilt u een vrijblijvende offerte? Wij staan voor u klaar.",
    "contactInfoTitle": "Contactgegevens",
    "contactInfoText": "U kunt ons bereiken via de onderstaande gegevens, of door het formulier in te vullen.",
    "contactAddressTitle": "Adres",
    "contactAddress": "Hazenstraat 65\n2500 Lier\nBelgië",
    "contactEmailTitle": "Email",
    "contactEmail": "info.andries.serviceplus@gmail.com",
    "contactPhoneTitle": "Telefoon",
    "contactPhone": "+32 494 39 92 86",
    "contactFormNameLabel": "Naam",
    "contactFormEmailLabel": "Emailadres",
    "contactFormMessageLabel": "Uw bericht",
    "contactFormSubmitButtonText": "Verstuur Bericht",
    "contactFormSuccessTitle": "Bericht Verzonden!",
    "contactFormSuccessText": "Bedankt voor uw bericht. We nemen zo spoedig mogelijk contact met u op.",
    "contactFormSuccessAgainButtonText": "Nog een bericht sturen",
    "contactMapEnabled": True,
    "contactMapUrl": "https://www.google.com/maps/embed?pb=!1m18!1m12!1m3!1d2503.491333794334!2d4.57099631583015!3d51.1357909795757",
    "facebookUrl": "https://www.facebook.com/",
    "footerCopyrightText": "Andries Service+. Alle rechten voorbehouden.",
    "logo": {"url": "/favicon.svg", "alt": "Andries Service+ Logo"},
    "heroImage": {"url": "https://i.postimg.cc/431ktwwb/Hero.jpg", "alt": "Mooi onderhouden tuin"},
    "beforeImage": {"url": "https://i.postimg.cc/L8gP8SYb/before-image.jpg", "alt": "Tuin voor onderhoud"},
    "afterImage": {"url": "https://i.postimg.cc/j5XbQ8cQ/after-image.jpg", "alt": "Tuin na onderhoud"},
    "ogImage": {"url": "https://i.postimg.cc/431ktwwb/Hero.jpg", "alt": "Andries Service+ Tuinonderhoud"},
}

DEFAULT_GALLERY_IMAGES = []


def default_page_content():
    return copy.deepcopy(DEFAULT_PAGE_CONTENT)


def default_gallery_images():
    return copy.deepcopy(DEFAULT_GALLERY_IMAGES)
