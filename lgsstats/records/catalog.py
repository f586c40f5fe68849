from __future__ import annotations

"""LGS subject catalogue: names, question counts, weights, topics."""

from typing import Dict, List, Optional

# Fixed curriculum order; charts and exam breakdowns follow it.
LGS_SUBJECTS = (
    "Türkçe",
    "Matematik",
    "Fen Bilgisi",
    "Sosyal Bilgiler",
    "Din Kültürü ve Ahlak Bilgisi",
    "İngilizce",
)

CORE_SUBJECTS = frozenset({"Türkçe", "Matematik", "Fen Bilgisi"})
CORE_MAX_QUESTIONS = 20
OTHER_MAX_QUESTIONS = 10
DEFAULT_WEIGHT = 5.0

# Flat exam columns in the store are prefixed with these keys.
EXAM_FIELD_PREFIXES: Dict[str, str] = {
    "turkce": "Türkçe",
    "matematik": "Matematik",
    "fen": "Fen Bilgisi",
    "sosyal": "Sosyal Bilgiler",
    "din": "Din Kültürü ve Ahlak Bilgisi",
    "ingilizce": "İngilizce",
}

# Older exam documents store the social-studies slot as "inkilap".
LEGACY_EXAM_PREFIXES: Dict[str, str] = {"inkilap": "Sosyal Bilgiler"}

SUBJECT_ALIASES: Dict[str, str] = {
    "Fen Bilimleri": "Fen Bilgisi",
    "Din Kültürü": "Din Kültürü ve Ahlak Bilgisi",
    "Sosyal": "Sosyal Bilgiler",
    "Fen": "Fen Bilgisi",
    "T.C. İnkılap Tarihi ve Atatürkçülük": "Sosyal Bilgiler",
    **EXAM_FIELD_PREFIXES,
    **LEGACY_EXAM_PREFIXES,
}

LGS_TOPICS: Dict[str, List[str]] = {
    "Türkçe": [
        "Okuma-Anlama",
        "Sözcük-Anlam İlişkisi",
        "Cümle-Anlam İlişkisi",
        "Paragraf-Anlam İlişkisi",
        "Yazım Kuralları",
        "Noktalama İşaretleri",
        "Dil Bilgisi",
        "Söz Sanatları",
        "Anlatım Biçimleri",
        "Metin Türleri",
    ],
    "Matematik": [
        "Çarpanlar ve Katlar",
        "Üslü İfadeler",
        "Kareköklü İfadeler",
        "Veri Analizi",
        "Merkezi Eğilim ve Yayılım Ölçüleri",
        "Olasılık",
        "Cebirsel İfadeler ve Özdeşlikler",
        "Doğrusal Denklemler",
        "Eşitsizlikler",
        "Üçgenler",
        "Dönüşüm Geometrisi",
        "Eşlik ve Benzerlik",
        "Geometrik Cisimler",
    ],
    "Fen Bilgisi": [
        "Mevsimler ve İklim",
        "DNA ve Genetik Kod",
        "Kalıtım",
        "Bağışıklık Sistemi",
        "Basınç",
        "Basit Makineler",
        "Enerji Dönüşümleri",
        "İş-Güç-Enerji",
        "Kimyasal Tepkimeler",
        "Asitler-Bazlar-Tuzlar",
        "Madde ve Endüstri",
        "Elektrik Yükleri",
        "Aydınlanma ve Ses",
        "Yenilenebilir Enerji",
    ],
    "Sosyal Bilgiler": [
        "İletişim ve İnsan İlişkileri",
        "Bilim ve Teknoloji",
        "Ekonomi ve Sosyal Hayat",
        "Küresel Bağlantılar",
        "Ülkeler Arası Köprüler",
        "Yaşayan Demokrasi",
        "Üretim-Dağıtım-Tüketim",
        "Harita Bilgisi",
        "Coğrafi Konum",
        "İklim ve Yerşekilleri",
    ],
    "Din Kültürü ve Ahlak Bilgisi": [
        "Kader ve Kaza",
        "Hz. Muhammed'in Hayatı",
        "Peygamberimizin Örnekliği",
        "Kur'an-ı Kerim",
        "İslam ve İbadet",
        "Namaz",
        "Oruç",
        "Zekat ve Sadaka",
        "Ahlak ve Güzel Davranışlar",
        "Dinler ve Evrensel Değerler",
    ],
    "İngilizce": [
        "Friendship",
        "Teen Life",
        "In the Kitchen",
        "On the Phone",
        "The Internet",
        "Adventures",
        "Tourism",
        "Chores",
        "Science",
        "Saving the Planet",
    ],
}


def canonical_subject(name: str) -> str:
    """Resolve store aliases to the catalogue name; unknown names pass through."""
    name = name.strip()
    return SUBJECT_ALIASES.get(name, name)


def default_max_questions(name: str) -> Optional[int]:
    subject = canonical_subject(name)
    if subject not in LGS_SUBJECTS:
        return None
    return CORE_MAX_QUESTIONS if subject in CORE_SUBJECTS else OTHER_MAX_QUESTIONS


def subject_topics(name: str) -> List[str]:
    """Return the topic list for a subject (empty for unknown subjects)."""
    return list(LGS_TOPICS.get(canonical_subject(name), []))
