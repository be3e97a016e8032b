from django.core.management.base import BaseCommand, CommandError

from config.dictionaries.logic.consistency import CATALOGS, find_problems



class Command(BaseCommand):
    help = "Load ISO dictionaries and verify country -> currency/language references."

    def handle(self, *args, **options):
        problems = find_problems()

        for catalog in CATALOGS:
            self.stdout.write(f"{catalog.standard.name}: {len(catalog)} records")

        if problems:
            for problem in problems:
                self.stderr.write(problem)
            raise CommandError(f"{len(problems)} broken reference(s) in dictionaries.")

        self.stdout.write(self.style.SUCCESS("Dictionaries are consistent."))
