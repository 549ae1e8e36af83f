"""
Contains the message tables of the built-in locales.
"""
from frozendict import frozendict

DEFAULT_MESSAGES: frozendict[str, str] = frozendict(
    {
        "required": "The field is required.",
        "no_match": "The values do not match.",
        "min_length": "The field must be at least {length} characters long.",
        "max_length": "The field must be at most {length} characters long.",
        "email": "'{value}' is not a valid email address.",
        "phone_number": "'{value}' is not a valid phone number.",
        "ip": "'{value}' is not a valid IP address.",
        "ipv6": "'{value}' is not a valid IPv6 address.",
        "url": "'{value}' is not a valid URL address.",
    }
)

EN_MESSAGES: frozendict[str, str] = DEFAULT_MESSAGES

DE_MESSAGES: frozendict[str, str] = frozendict(
    {
        "required": "Dieses Feld ist erforderlich.",
        "no_match": "Die Werte stimmen nicht überein.",
        "min_length": "Das Feld muss mindestens {length} Zeichen lang sein.",
        "max_length": "Das Feld darf höchstens {length} Zeichen lang sein.",
        "email": "'{value}' ist keine gültige E-Mail-Adresse.",
        "phone_number": "'{value}' ist keine gültige Telefonnummer.",
        "ip": "'{value}' ist keine gültige IP-Adresse.",
        "ipv6": "'{value}' ist keine gültige IPv6-Adresse.",
        "url": "'{value}' ist keine gültige URL.",
    }
)

FR_MESSAGES: frozendict[str, str] = frozendict(
    {
        "required": "Ce champ est obligatoire.",
        "no_match": "Les valeurs ne correspondent pas.",
        "min_length": "Le champ doit contenir au moins {length} caractères.",
        "max_length": "Le champ doit contenir au plus {length} caractères.",
        "email": "'{value}' n'est pas une adresse e-mail valide.",
        "phone_number": "'{value}' n'est pas un numéro de téléphone valide.",
        "ip": "'{value}' n'est pas une adresse IP valide.",
        "ipv6": "'{value}' n'est pas une adresse IPv6 valide.",
        "url": "'{value}' n'est pas une URL valide.",
    }
)

ES_MESSAGES: frozendict[str, str] = frozendict(
    {
        "required": "Este campo es obligatorio.",
        "no_match": "Los valores no coinciden.",
        "min_length": "El campo debe tener al menos {length} caracteres.",
        "max_length": "El campo debe tener como máximo {length} caracteres.",
        "email": "'{value}' no es un correo electrónico válido.",
        "phone_number": "'{value}' no es un número de teléfono válido.",
        "ip": "'{value}' no es una dirección IP válida.",
        "ipv6": "'{value}' no es una dirección IPv6 válida.",
        "url": "'{value}' no es una URL válida.",
    }
)

IT_MESSAGES: frozendict[str, str] = frozendict(
    {
        "required": "Il campo è obbligatorio.",
        "no_match": "I valori non corrispondono.",
        "min_length": "Il campo deve contenere almeno {length} caratteri.",
        "max_length": "Il campo deve contenere al massimo {length} caratteri.",
        "email": "'{value}' non è un indirizzo email valido.",
        "phone_number": "'{value}' non è un numero di telefono valido.",
        "ip": "'{value}' non è un indirizzo IP valido.",
        "ipv6": "'{value}' non è un indirizzo IPv6 valido.",
        "url": "'{value}' non è un URL valido.",
    }
)

NL_MESSAGES: frozendict[str, str] = frozendict(
    {
        "required": "Dit veld is verplicht.",
        "no_match": "De waarden komen niet overeen.",
        "min_length": "Het veld moet minimaal {length} tekens lang zijn.",
        "max_length": "Het veld mag maximaal {length} tekens lang zijn.",
        "email": "'{value}' is geen geldig e-mailadres.",
        "phone_number": "'{value}' is geen geldig telefoonnummer.",
        "ip": "'{value}' is geen geldig IP-adres.",
        "ipv6": "'{value}' is geen geldig IPv6-adres.",
        "url": "'{value}' is geen geldige URL.",
    }
)

PT_MESSAGES: frozendict[str, str] = frozendict(
    {
        "required": "O campo é obrigatório.",
        "no_match": "Os valores não coincidem.",
        "min_length": "O campo deve ter pelo menos {length} caracteres.",
        "max_length": "O campo deve ter no máximo {length} caracteres.",
        "email": "'{value}' não é um endereço de e-mail válido.",
        "phone_number": "'{value}' não é um número de telefone válido.",
        "ip": "'{value}' não é um endereço IP válido.",
        "ipv6": "'{value}' não é um endereço IPv6 válido.",
        "url": "'{value}' não é uma URL válida.",
    }
)

TR_MESSAGES: frozendict[str, str] = frozendict(
    {
        "required": "Bu alan zorunludur.",
        "no_match": "Değerler eşleşmiyor.",
        "min_length": "Bu alan en az {length} karakter uzunluğunda olmalıdır.",
        "max_length": "Bu alan en fazla {length} karakter uzunluğunda olmalıdır.",
        "email": "'{value}' geçerli bir e-posta adresi değil.",
        "phone_number": "'{value}' geçerli bir telefon numarası değil.",
        "ip": "'{value}' geçerli bir IP adresi değil.",
        "ipv6": "'{value}' geçerli bir IPv6 adresi değil.",
        "url": "'{value}' geçerli bir URL adresi değil.",
    }
)

RU_MESSAGES: frozendict[str, str] = frozendict(
    {
        "required": "Это поле обязательно.",
        "no_match": "Значения не совпадают.",
        "min_length": "Поле должно содержать не менее {length} символов.",
        "max_length": "Поле должно содержать не более {length} символов.",
        "email": "'{value}' не является действительным адресом электронной почты.",
        "phone_number": "'{value}' не является действительным номером телефона.",
        "ip": "'{value}' не является действительным IP-адресом.",
        "ipv6": "'{value}' не является действительным IPv6-адресом.",
        "url": "'{value}' не является действительным URL-адресом.",
    }
)

BUILTIN_MESSAGES: frozendict[str, frozendict[str, str]] = frozendict(
    {
        "default": DEFAULT_MESSAGES,
        "en": EN_MESSAGES,
        "de": DE_MESSAGES,
        "fr": FR_MESSAGES,
        "es": ES_MESSAGES,
        "it": IT_MESSAGES,
        "nl": NL_MESSAGES,
        "pt": PT_MESSAGES,
        "tr": TR_MESSAGES,
        "ru": RU_MESSAGES,
    }
)
