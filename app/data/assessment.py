# app/data/assessment.py
DEFAULT_LANGUAGE = "fa"

LANGUAGES = [
    {"id": "fa", "label": "فارسی", "dir": "rtl"},
    {"id": "en", "label": "English", "dir": "ltr"},
    {"id": "tr", "label": "Türkçe", "dir": "ltr"},
    {"id": "ar", "label": "العربية", "dir": "rtl"},
]

MESSAGES = {
    "fa": {
        "error": "خطایی رخ داد. لطفا دوباره تلاش کنید.",
        "important_note": "نکته مهم",
        "anonymous": "ناشناس",
        "ai_unavailable": "دستیار هوشمند در حال حاضر در دسترس نیست.",
    },
    "en": {
        "error": "An error occurred. Please try again.",
        "important_note": "Important Note",
        "anonymous": "Anonymous",
        "ai_unavailable": "The smart assistant is currently unavailable.",
    },
    "tr": {
        "error": "Bir hata oluştu. Lütfen tekrar deneyin.",
        "important_note": "Önemli Not",
        "anonymous": "Anonim",
        "ai_unavailable": "Akıllı asistan şu anda kullanılamıyor.",
    },
    "ar": {
        "error": "حدث خطأ. يرجى المحاولة مرة أخرى.",
        "important_note": "ملاحظة مهمة",
        "anonymous": "مجهول",
        "ai_unavailable": "المساعد الذكي غير متاح حاليا.",
    },
}

# Trait order matters: ties in the assessment go to the later trait.
PERSONALITY_TRAITS = {
    "sensitive": {
        "label": {"fa": "حساس و همدل", "en": "Sensitive & Empathetic"},
        "description": {"fa": "تمرکز بر دنیای درونی و احساسات", "en": "Focus on inner world and emotions"},
    },
    "logical": {
        "label": {"fa": "منطقی و تحلیل‌گر", "en": "Logical & Analytical"},
        "description": {"fa": "تمرکز بر شواهد علمی و ساختارها", "en": "Focus on scientific evidence and structures"},
    },
    "anxious": {
        "label": {"fa": "مضطرب و محتاط", "en": "Anxious & Cautious"},
        "description": {"fa": "نیاز به آرامش و اطمینان‌بخشی", "en": "Need for calm and reassurance"},
    },
    "perfectionist": {
        "label": {"fa": "کمال‌گرا و دقیق", "en": "Perfectionist & Precise"},
        "description": {"fa": "تمرکز بر استانداردها و پذیرش نقص", "en": "Focus on standards and accepting flaws"},
    },
}

DEFAULT_PERSONALITY = "logical"

RESPONSE_STYLES = [
    {
        "id": "friendly",
        "label": {"fa": "خودمانی و دوستانه", "en": "Friendly & Casual"},
        "description": {"fa": "لحنی گرم و صمیمی مثل یک گفتگوی دوستانه", "en": "Warm and intimate like a friendly conversation"},
    },
    {
        "id": "formal",
        "label": {"fa": "رسمی و آکادمیک", "en": "Formal & Academic"},
        "description": {"fa": "لحنی جدی، دقیق و علمی مشابه سخنرانی‌های دانشگاهی", "en": "Serious, precise and scientific like a university lecture"},
    },
    {
        "id": "story",
        "label": {"fa": "داستانی و روایی", "en": "Storytelling"},
        "description": {"fa": "استفاده از حکایت‌ها و تمثیل‌های جذاب برای انتقال مفاهیم", "en": "Using engaging anecdotes and parables to convey concepts"},
    },
    {
        "id": "example",
        "label": {"fa": "مثال‌محور و کاربردی", "en": "Example-Based"},
        "description": {"fa": "تمرکز بر مثال‌های عینی و آزمایش‌های علمی معروف", "en": "Focus on concrete examples and famous scientific experiments"},
    },
]

ASSESSMENT_QUESTIONS = [
    {
        "id": "q1",
        "question": {
            "fa": "وقتی با یک چالش جدید روبرو می‌شوید، اولین واکنش شما چیست؟",
            "en": "When faced with a new challenge, what is your first reaction?",
        },
        "options": [
            {"text": {"fa": "احساساتم درگیر می‌شود و ممکن است نگران شوم.", "en": "I get emotional and might worry."}, "trait": "sensitive"},
            {"text": {"fa": "سعی می‌کنم خونسرد باشم و ابعاد منطقی موضوع را بررسی کنم.", "en": "I try to stay calm and analyze the logical aspects."}, "trait": "logical"},
            {"text": {"fa": "بلافاصله سناریوهای بد احتمالی به ذهنم می‌رسد.", "en": "Bad scenarios immediately come to mind."}, "trait": "anxious"},
            {"text": {"fa": "به این فکر می‌کنم که چطور می‌توانم آن را به بهترین شکل ممکن انجام دهم.", "en": "I think about how to do it perfectly."}, "trait": "perfectionist"},
        ],
    },
    {
        "id": "q2",
        "question": {
            "fa": "در روابط بین‌فردی، کدام مورد برای شما اولویت دارد؟",
            "en": "In interpersonal relationships, what is your priority?",
        },
        "options": [
            {"text": {"fa": "درک متقابل احساسات و همدلی عمیق.", "en": "Mutual understanding and deep empathy."}, "trait": "sensitive"},
            {"text": {"fa": "صداقت، وضوح و حل مسائل به صورت ریشه‌ای.", "en": "Honesty, clarity, and solving issues at the root."}, "trait": "logical"},
            {"text": {"fa": "داشتن امنیت و اطمینان خاطر از طرف مقابل.", "en": "Having security and reassurance from the other person."}, "trait": "anxious"},
            {"text": {"fa": "رعایت نظم، اصول و استانداردهای اخلاقی بالا.", "en": "Maintaining order, principles, and high ethical standards."}, "trait": "perfectionist"},
        ],
    },
    {
        "id": "q3",
        "question": {
            "fa": "اگر کاری دقیقاً آن‌طور که می‌خواستید پیش نرود، چه حسی پیدا می‌کنید؟",
            "en": "If something doesn't go exactly as you wanted, how do you feel?",
        },
        "options": [
            {"text": {"fa": "خیلی ناراحت می‌شوم و ممکن است از خودم برنجم.", "en": "I get very upset and might blame myself."}, "trait": "sensitive"},
            {"text": {"fa": "تحلیل می‌کنم که کجای کار اشتباه بوده تا دفعه بعد اصلاحش کنم.", "en": "I analyze what went wrong to fix it next time."}, "trait": "logical"},
            {"text": {"fa": "دچار استرس می‌شوم که نکند عواقب بدی داشته باشد.", "en": "I get stressed about potential bad consequences."}, "trait": "anxious"},
            {"text": {"fa": "به شدت کلافه می‌شوم و تا نقص را برطرف نکنم آرام نمی‌گیرم.", "en": "I get extremely frustrated and won't rest until it's fixed."}, "trait": "perfectionist"},
        ],
    },
]


def localize(labels: dict, language: str) -> str:
    """Pick the label for a language, falling back to Persian."""
    return labels.get(language) or labels[DEFAULT_LANGUAGE]


def get_message(key: str, language: str) -> str:
    return MESSAGES.get(language, MESSAGES[DEFAULT_LANGUAGE])[key]
