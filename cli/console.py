"""Console UI for the quest mini-games."""

import time

import requests

from cli.api_client import QuestAPIClient

GAME_ALIASES = {
    'speed-verb': 'speed-verb-challenge',
    'wordfall': 'wordfall',
    'enigma': 'enigma-scroll',
}

FIELD_PROMPTS = {
    'past_simple': 'Past simple',
    'past_participle': 'Past participle',
    'translation': 'French translation',
}

STATUS_MARKS = {'correct': '[{}]', 'present': '({})', 'absent': ' {} ', 'empty': ' {} '}


class ConsoleUI:
    """Console user interface for the quest server."""

    def __init__(self, client: QuestAPIClient):
        self.client = client
        self.session_id = None
        self._last_tick = None

    def elapsed_ms(self) -> int:
        """Milliseconds since the previous call (wall clock)."""
        now = time.monotonic()
        last = self._last_tick if self._last_tick is not None else now
        self._last_tick = now
        return int((now - last) * 1000)

    def sync_clock(self) -> dict:
        """Report elapsed time to the server and return the fresh snapshot."""
        return self.client.tick(self.session_id, self.elapsed_ms())

    def print_header(self, data: dict):
        seconds = data.get('time_left_ms', 0) / 1000
        print('=' * 40)
        parts = [f"Score: {data['score']}", f"Streak: {data['streak']}", f"x{data['combo']:.2f}"]
        if 'lives' in data:
            parts.append(f"Lives: {data['lives']}")
            parts.append(f"Level: {data['level']}")
        else:
            parts.append(f'Time: {seconds:.1f}s')
        print(' | '.join(parts))
        print('=' * 40)

    def print_verb_result(self, response: dict):
        result = response['result']
        if result['is_correct']:
            print(f"Correct! +{result['points_awarded']} points")
            if result['speed_bonus']:
                print(f"  Speed bonus: +{result['speed_bonus']}")
            if result['is_milestone']:
                print(f"  *** Streak {result['streak_after']}! +{result['milestone_bonus']} ***")
            if result['time_bonus_ms']:
                print(f"  +{result['time_bonus_ms'] / 1000:.0f}s")
        elif result['applied']:
            expected = response.get('expected', {})
            print('Wrong.')
            for field, ok in result['field_results'].items():
                if not ok:
                    answers = ', '.join(expected.get('answers', {}).get(field, []))
                    print(f"  {FIELD_PROMPTS.get(field, field)}: {answers}")
        else:
            print(f"Not counted: {result['reason']}")

    def print_grid(self, data: dict):
        for row in data['rows']:
            if not row['submitted'] and not any(row['letters']):
                print('  ' + ' _ ' * data['word_length'])
                continue
            cells = [STATUS_MARKS[s].format(l or '_') for l, s in zip(row['letters'], row['statuses'])]
            print('  ' + ''.join(cells))

    def print_summary(self, finish: dict):
        summary = finish['summary']
        print('\n' + '=' * 40)
        print('GAME OVER')
        print('=' * 40)
        print(f"Score: {summary['score']}")
        print(f"Best streak: {summary['highest_streak']}")
        print(f"Rounds completed: {summary['rounds_completed']}")
        best = finish.get('personal_best')
        if best:
            print(f"Personal best ({summary['difficulty']}): {best['score']}")
        if not finish['saved']:
            print('Warning: result could not be saved')
        print('=' * 40)

    def play_speed_verb(self, data: dict) -> bool:
        """One verb. Returns False when the player quits."""
        self.print_header(data)
        print(f"\n>>> {data['verb']}")
        shown = time.monotonic()
        answers = {}
        for field in data['required']:
            user_input = input(f'{FIELD_PROMPTS[field]} ==> ').strip()
            if user_input.lower() == 'exit':
                return False
            if user_input.lower() == 'skip':
                self.sync_clock()
                self.client.skip(self.session_id)
                return True
            answers[field] = user_input
        answer_time_ms = int((time.monotonic() - shown) * 1000)
        self.sync_clock()
        response = self.client.answer_verb(self.session_id, answer_time_ms=answer_time_ms, **answers)
        self.print_verb_result(response)
        return True

    def play_wordfall(self, data: dict) -> bool:
        self.print_header(data)
        word = data['word']
        if word is None:
            self.client.next_round(self.session_id)
            return True
        height = int(word['y'])
        if data['mode'] == 'free':
            print(f"\nWord starting with {word['text']}  (fallen {height}%)")
        else:
            print(f"\n>>> {word['text']}  (fallen {height}%)")
        user_input = input('==> ').strip()
        if user_input.lower() == 'exit':
            return False
        data = self.sync_clock()
        if data['word'] is None or data['word']['id'] != word['id']:
            print('Too late, the word hit the bottom!')
            return True
        response = self.client.submit_text(self.session_id, user_input)
        result = response['result']
        if result['success']:
            print(f"Caught! +{result['points_awarded']} points")
        else:
            print(f"Missed: {result['reason']}")
        return True

    def play_enigma(self, data: dict) -> bool:
        self.print_header(data)
        if data['phase'] == 'answered':
            print(f"The word was {data['target']}")
            self.client.next_round(self.session_id)
            return True
        self.print_grid(data)
        user_input = input(f"{data['word_length']} letters ==> ").strip()
        if user_input.lower() == 'exit':
            return False
        self.sync_clock()
        response = self.client.submit_text(self.session_id, user_input)
        result = response['result']
        if not result['applied']:
            print(result['reason'])
        elif result['won']:
            print(f"Found it! +{result['points_awarded']} points")
        return True

    def run(self, game: str, **options):
        """Run the main application loop."""
        # Check server connection
        try:
            health = self.client.health_check()
            print(f"Connected to quest server ({health['service']})")
        except requests.RequestException:
            print(f"Error: Cannot connect to server at {self.client.base_url}")
            print("Make sure the server is running: python run_server.py")
            return

        data = self.client.create_session(game, **options)
        self.session_id = data['session_id']
        self.elapsed_ms()
        print('Commands: "exit" to stop' + (', "skip" to skip a verb' if game == 'speed-verb-challenge' else ''))

        play = {
            'speed-verb-challenge': self.play_speed_verb,
            'wordfall': self.play_wordfall,
            'enigma-scroll': self.play_enigma,
        }[game]

        while not data['ended']:
            try:
                if not play(data):
                    break
                data = self.sync_clock()
            except requests.RequestException as e:
                print(f"Error talking to server: {e}")
                break

        self.print_summary(self.client.finish(self.session_id))
