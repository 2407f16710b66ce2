"""
Domain-term substitution tables for the normalizer

Each table is an ordered list of (source terms, English replacement).
Blood-type phrases come first (longest group first, so एबी is consumed
before ए or बी), then compound terms, then single terms.
"""

HINDI_GROUPS = [("एबी", "AB"), ("ए", "A"), ("बी", "B"), ("ओ", "O")]
HINDI_RH = [
    (["पॉजिटिव", "पोजिटिव", "पाजिटिव"], "positive"),
    (["नेगेटिव", "नेगटिव"], "negative"),
]

TELUGU_GROUPS = [("ఎబి", "AB"), ("ఎ", "A"), ("బి", "B"), ("ఓ", "O")]
TELUGU_RH = [
    (["పాజిటివ్", "పోజిటివ్"], "positive"),
    (["నెగటివ్", "నెగెటివ్"], "negative"),
]

HINDI_TERMS = [
    # Compound terms
    (["रक्तदान"], "blood donation"),
    (["दवाई", "दवा"], "medicine"),
    # Single terms
    (["रक्त", "खून"], "blood"),
    (["चाहिए", "आवश्यक", "जरूरत", "ज़रूरत"], "need"),
    (["तुरंत", "तत्काल"], "urgent"),
    (["आपातकाल"], "emergency"),
    (["बुजुर्ग"], "elderly"),
    (["किराना"], "grocery"),
    (["देखभाल"], "care"),
    (["मदद"], "help"),
    (["शिकायत"], "complaint"),
    (["समस्या"], "problem"),
    (["सड़क", "सडक"], "road"),
    (["बत्ती", "लाइट"], "light"),
    (["पानी"], "water"),
    (["बिजली"], "electricity"),
    (["कचरा"], "garbage"),
    (["अस्पताल"], "hospital"),
    (["मरीज", "रोगी"], "patient"),
    (["सर्जरी", "ऑपरेशन"], "surgery"),
    (["पॉजिटिव", "पोजिटिव", "पाजिटिव"], "positive"),
    (["नेगेटिव", "नेगटिव"], "negative"),
]

TELUGU_TERMS = [
    # Compound terms
    (["రక్తదానం"], "blood donation"),
    (["మందులు", "మందు"], "medicine"),
    (["శస్త్రచికిత్స"], "surgery"),
    # Single terms
    (["రక్తం"], "blood"),
    (["కావాలి", "అవసరం"], "need"),
    (["అత్యవసరం", "తక్షణం"], "urgent"),
    (["వృద్ధులు", "పెద్దలు"], "elderly"),
    (["కిరాణా"], "grocery"),
    (["సంరక్షణ"], "care"),
    (["సహాయం"], "help"),
    (["ఫిర్యాదు"], "complaint"),
    (["సమస్య"], "problem"),
    (["రోడ్డు"], "road"),
    (["లైట్"], "light"),
    (["నీరు", "నీళ్లు"], "water"),
    (["కరెంట్", "కరెంటు"], "electricity"),
    (["చెత్త"], "garbage"),
    (["ఆసుపత్రి"], "hospital"),
    (["రోగి"], "patient"),
    (["పాజిటివ్", "పోజిటివ్"], "positive"),
    (["నెగటివ్", "నెగెటివ్"], "negative"),
]
