"""
Couche services applicatifs (cas d'utilisation).

Les services orchestrent la logique du domaine pour réaliser les cas
d'utilisation de l'application, entre les entités, les ports et
l'adaptateur web.

Contenu :
- validator : règles déclaratives des champs de Movie
- movie_pipeline : chaîne décodage -> validation des requêtes de mutation
- seeding : chargement du catalogue de démonstration

Les services dépendent des ports (interfaces) de core/, jamais des
implémentations concrètes de infrastructure/.
"""
