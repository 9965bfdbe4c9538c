from __future__ import annotations

from typing import Any

EN: dict[str, Any] = {
    "nav": {
        "home": "HOME",
        "services": "SERVICES",
        "about": "ABOUT",
        "contact": "CONTACT",
        "patient_login": "Patient Login",
        "nurse_login": "Nurse Login",
        "dashboard": "MY DASHBOARD",
        "logout": "Logout",
        "language": "தமிழ்",
    },
    "hero": {
        "title": "Quality Healthcare at Your Doorstep",
        "subtitle": "Trained nurses and caregivers bringing hospital-grade care to your home.",
        "cta": "Book a Visit",
        "check_area": "Check service availability in your area",
    },
    "services": {
        "title": "Our Services",
        "subtitle": "Comprehensive care tailored to every stage of recovery.",
        "starting_from": "Starting from ",
        "items": [
            {
                "id": "home-care",
                "title": "Home Nursing Care",
                "description": "Skilled nurses for post-operative care, wound dressing and daily medical support at home.",
                "subServices": [
                    {"name": "Wound Dressing", "description": "Sterile dressing and wound monitoring.", "price": 500},
                    {"name": "Injection & IV Therapy", "description": "Injections and IV fluids given by trained nurses.", "price": 400},
                    {"name": "24-Hour Nursing", "description": "Round-the-clock nursing attendant.", "price": 2500},
                ],
            },
            {
                "id": "rehabilitation",
                "title": "Rehabilitation",
                "description": "Physiotherapy and rehabilitation programmes to restore mobility and independence.",
                "subServices": [
                    {"name": "Physiotherapy Session", "description": "One-to-one session with a physiotherapist.", "price": 800},
                    {"name": "Stroke Rehabilitation", "description": "Structured recovery plan after stroke.", "price": 1200},
                    {"name": "Post-Surgery Mobility", "description": "Guided exercises after orthopaedic surgery.", "price": 1000},
                ],
            },
            {
                "id": "primary-care",
                "title": "Primary Care",
                "description": "Doctor visits, health check-ups and chronic condition monitoring at home.",
                "subServices": [
                    {"name": "Doctor Home Visit", "description": "General physician consultation at home.", "price": 1000},
                    {"name": "Health Check-up", "description": "Vitals, blood sugar and blood pressure screening.", "price": 600},
                    {"name": "Sample Collection", "description": "Lab sample collection from home.", "price": 200},
                ],
            },
            {
                "id": "medical-equipment",
                "title": "Medical Equipment",
                "description": "Rental and delivery of hospital beds, oxygen concentrators and mobility aids.",
                "subServices": [
                    {"name": "Hospital Bed Rental", "description": "Semi-fowler and fowler beds, per month.", "price": 3000},
                    {"name": "Oxygen Concentrator", "description": "5 litre concentrator rental, per month.", "price": 4500},
                    {"name": "Wheelchair Rental", "description": "Foldable wheelchair, per month.", "price": 800},
                ],
            },
        ],
    },
    "about": {
        "title": "About Us",
        "description": "We are a team of nurses, physiotherapists and doctors committed to compassionate care at home.",
        "stats": [
            {"label": "Patients Served", "value": "5000+"},
            {"label": "Qualified Nurses", "value": "120+"},
            {"label": "Years of Service", "value": "10"},
        ],
    },
    "contact": {
        "title": "Contact Us",
        "phone": "+91 44 0000 0000",
        "email": "care@example.com",
        "address": "Chennai, Tamil Nadu",
        "form": {"name": "Name", "phone": "Phone", "message": "Message", "submit": "Send"},
    },
}

TA: dict[str, Any] = {
    "nav": {
        "home": "முகப்பு",
        "services": "சேவைகள்",
        "about": "எங்களைப் பற்றி",
        "contact": "தொடர்பு",
        "patient_login": "நோயாளி உள்நுழைவு",
        "nurse_login": "செவிலியர் உள்நுழைவு",
        "dashboard": "என் டாஷ்போர்டு",
        "logout": "வெளியேறு",
        "language": "English",
    },
    "hero": {
        "title": "உங்கள் வீட்டு வாசலில் தரமான மருத்துவ சேவை",
        "subtitle": "பயிற்சி பெற்ற செவிலியர்கள் மருத்துவமனை தர சிகிச்சையை உங்கள் வீட்டிற்கே கொண்டு வருகிறார்கள்.",
        "cta": "வருகையை பதிவு செய்யவும்",
        "check_area": "உங்கள் பகுதியில் சேவை உள்ளதா என சரிபார்க்கவும்",
    },
    "services": {
        "title": "எங்கள் சேவைகள்",
        "subtitle": "மீட்சியின் ஒவ்வொரு கட்டத்திற்கும் ஏற்ற முழுமையான பராமரிப்பு.",
        "starting_from": "தொடக்க விலை ",
        "items": [
            {
                "id": "home-care",
                "title": "வீட்டு செவிலியர் பராமரிப்பு",
                "description": "அறுவை சிகிச்சைக்குப் பிந்தைய பராமரிப்பு, காயக் கட்டு மற்றும் தினசரி மருத்துவ உதவி.",
                "subServices": [
                    {"name": "காயக் கட்டு", "description": "சுத்தமான கட்டு மற்றும் காயக் கண்காணிப்பு.", "price": 500},
                    {"name": "ஊசி மற்றும் IV சிகிச்சை", "description": "பயிற்சி பெற்ற செவிலியர்களால் ஊசி மற்றும் IV திரவங்கள்.", "price": 400},
                    {"name": "24 மணி நேர செவிலியர்", "description": "இரவு பகல் செவிலியர் உதவி.", "price": 2500},
                ],
            },
            {
                "id": "rehabilitation",
                "title": "மறுவாழ்வு",
                "description": "இயக்கத்தையும் சுயசார்பையும் மீட்டெடுக்க பிசியோதெரபி மற்றும் மறுவாழ்வு திட்டங்கள்.",
                "subServices": [
                    {"name": "பிசியோதெரபி அமர்வு", "description": "பிசியோதெரபிஸ்டுடன் தனிப்பட்ட அமர்வு.", "price": 800},
                    {"name": "பக்கவாத மறுவாழ்வு", "description": "பக்கவாதத்திற்குப் பின் மீட்சித் திட்டம்.", "price": 1200},
                    {"name": "அறுவைக்குப் பிந்தைய இயக்கம்", "description": "எலும்பு அறுவை சிகிச்சைக்குப் பின் வழிகாட்டப்பட்ட பயிற்சிகள்.", "price": 1000},
                ],
            },
            {
                "id": "primary-care",
                "title": "முதன்மை சிகிச்சை",
                "description": "மருத்துவர் வருகை, உடல் பரிசோதனை மற்றும் நீண்டகால நோய் கண்காணிப்பு.",
                "subServices": [
                    {"name": "மருத்துவர் வீட்டு வருகை", "description": "வீட்டிலேயே பொது மருத்துவர் ஆலோசனை.", "price": 1000},
                    {"name": "உடல் பரிசோதனை", "description": "இரத்த அழுத்தம் மற்றும் சர்க்கரை பரிசோதனை.", "price": 600},
                    {"name": "மாதிரி சேகரிப்பு", "description": "வீட்டிலிருந்து ஆய்வக மாதிரி சேகரிப்பு.", "price": 200},
                ],
            },
            {
                "id": "medical-equipment",
                "title": "மருத்துவ உபகரணங்கள்",
                "description": "மருத்துவமனை படுக்கை, ஆக்சிஜன் கருவி மற்றும் நடமாட்ட உதவிகள் வாடகைக்கு.",
                "subServices": [
                    {"name": "மருத்துவமனை படுக்கை வாடகை", "description": "மாத வாடகை படுக்கைகள்.", "price": 3000},
                    {"name": "ஆக்சிஜன் கருவி", "description": "5 லிட்டர் கருவி, மாத வாடகை.", "price": 4500},
                    {"name": "சக்கர நாற்காலி வாடகை", "description": "மடிக்கக்கூடிய சக்கர நாற்காலி, மாத வாடகை.", "price": 800},
                ],
            },
        ],
    },
    "about": {
        "title": "எங்களைப் பற்றி",
        "description": "வீட்டிலேயே அன்பான பராமரிப்பை வழங்கும் செவிலியர்கள், பிசியோதெரபிஸ்டுகள் மற்றும் மருத்துவர்கள் குழு.",
        "stats": [
            {"label": "சேவை பெற்ற நோயாளிகள்", "value": "5000+"},
            {"label": "தகுதியான செவிலியர்கள்", "value": "120+"},
            {"label": "சேவை ஆண்டுகள்", "value": "10"},
        ],
    },
    "contact": {
        "title": "தொடர்பு கொள்ள",
        "phone": "+91 44 0000 0000",
        "email": "care@example.com",
        "address": "சென்னை, தமிழ்நாடு",
        "form": {"name": "பெயர்", "phone": "தொலைபேசி", "message": "செய்தி", "submit": "அனுப்பு"},
    },
}
