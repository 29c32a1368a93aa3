import sys

from vcardmap.logging_config import setup_logging
from vcardmap.vcards import parse_vcards, records_to_vcards30

VCARD_21_CHARSET = (
    "BEGIN:VCARD\r\n"
    "VERSION:2.1\r\n"
    "N;CHARSET=ISO-8859-1:Dör;Jöhn;;;\r\n"
    "FN;CHARSET=ISO-8859-1:Jöhn Dör\r\n"
    "TEL;HOME:(555) 010-2000\r\n"
    "TEL;WORK:+1 555 010 2001\r\n"
    "EMAIL;INTERNET:john@example.com\r\n"
    "EMAIL;INTERNET:john.work@example.com\r\n"
    "ORG;CHARSET=ISO-8859-1:Åcme;Sälës\r\n"
    "END:VCARD\r\n"
)


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    setup_logging("DEBUG")
    if argv:
        with open(argv[0], encoding="utf-8", errors="ignore") as f:
            text = f.read()
    else:
        text = VCARD_21_CHARSET
    contacts = parse_vcards(text)
    for contact in contacts:
        print("Parsed:", contact, sep="\n")
    print("Output:\n" + records_to_vcards30(contacts))
    return 0


if __name__ == "__main__":
    sys.exit(main())
