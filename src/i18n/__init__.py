# i18n — Texte fuer die Benutzeroberflaeche
