import logging
import sys

import pygame

from slide2048.board import SIZE
from slide2048.game import Direction, Game2048, GameStatus


logger = logging.getLogger(__name__)

COLORS = {
    'background': (248, 250, 252),
    'grid_background': (165, 174, 185),
    'empty_cell': (203, 213, 225),
    'text_dark': (51, 65, 85),
    'text_light': (255, 255, 255),
    'button': (51, 153, 204),
    'banner': (255, 255, 255),
    # tile colors
    2: (219, 234, 254),
    4: (191, 219, 254),
    8: (147, 197, 253),
    16: (96, 165, 250),
    32: (59, 130, 246),
    64: (37, 99, 235),
    128: (29, 78, 216),
    256: (30, 64, 175),
    512: (30, 58, 138),
    1024: (23, 37, 84),
    2048: (15, 23, 42),
}

KEY_TO_DIRECTION = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

BANNERS = {
    GameStatus.WON: "You Win!",
    GameStatus.OVER: "Game Over!",
}


class GameGUI:
    def __init__(self, game=None):
        """initialize game GUI"""
        pygame.init()
        self.game = game if game is not None else Game2048()
        size = self.game.get_size()

        self.cell_size = 100
        self.cell_margin = 10
        self.header_height = 80
        self.footer_height = 70

        grid_size = size * self.cell_size + (size + 1) * self.cell_margin
        self.window_width = grid_size
        self.window_height = grid_size + self.header_height + self.footer_height

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("2048 Game")

        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)
        self.font_small = pygame.font.Font(None, 24)

        self.restart_button = pygame.Rect(
            (self.window_width - 120) // 2,
            self.header_height + grid_size + 15,
            120,
            40,
        )

        self.clock = pygame.time.Clock()

    def get_tile_color(self, value):
        """get background color for a tile value"""
        if value in COLORS:
            return COLORS[value]
        elif value > 2048:
            return COLORS[2048]
        else:
            return COLORS['empty_cell']

    def get_text_color(self, value):
        """get text color for a tile value"""
        if value <= 4:
            return COLORS['text_dark']
        else:
            return COLORS['text_light']

    def draw_board(self):
        """draw the whole window for the current game state"""
        self.screen.fill(COLORS['background'])

        self.draw_header()

        grid_rect = pygame.Rect(0, self.header_height, self.window_width, self.window_width)
        pygame.draw.rect(self.screen, COLORS['grid_background'], grid_rect)

        size = self.game.get_size()
        for row in range(size):
            for col in range(size):
                self.draw_cell(row, col)

        self.draw_restart_button()
        self.draw_banner()

    def draw_header(self):
        """draw instructions"""
        title = self.font_large.render("2048", True, COLORS['text_dark'])
        self.screen.blit(title, (20, 15))

        hint = self.font_small.render("Arrow keys to move, R to restart, ESC to quit", True, COLORS['text_dark'])
        self.screen.blit(hint, (20, 52))

    def draw_cell(self, row, col):
        """draw a single cell of the grid"""
        value = self.game.get_cell(row, col)

        x = col * (self.cell_size + self.cell_margin) + self.cell_margin
        y = row * (self.cell_size + self.cell_margin) + self.cell_margin + self.header_height

        cell_rect = pygame.Rect(x, y, self.cell_size, self.cell_size)
        pygame.draw.rect(self.screen, self.get_tile_color(value), cell_rect, border_radius=8)

        if value != 0:
            # smaller font for more digits
            if value < 100:
                font = self.font_large
            elif value < 1000:
                font = self.font_medium
            else:
                font = self.font_small

            text_surface = font.render(str(value), True, self.get_text_color(value))
            text_rect = text_surface.get_rect()
            text_rect.center = cell_rect.center
            self.screen.blit(text_surface, text_rect)

    def draw_restart_button(self):
        pygame.draw.rect(self.screen, COLORS['button'], self.restart_button, border_radius=6)
        label = self.font_small.render("Restart", True, COLORS['text_light'])
        label_rect = label.get_rect()
        label_rect.center = self.restart_button.center
        self.screen.blit(label, label_rect)

    def draw_banner(self):
        """overlay the win / game over message"""
        message = BANNERS.get(self.game.get_status())
        if message is None:
            return

        banner_rect = pygame.Rect(0, 0, 300, 100)
        banner_rect.center = (self.window_width // 2, self.header_height + self.window_width // 2)
        pygame.draw.rect(self.screen, COLORS['banner'], banner_rect, border_radius=8)

        text_surface = self.font_large.render(message, True, COLORS['text_dark'])
        text_rect = text_surface.get_rect()
        text_rect.center = banner_rect.center
        self.screen.blit(text_surface, text_rect)

    def handle_keypress(self, key):
        """keyboard input, returns False to quit"""
        if key == pygame.K_ESCAPE:
            return False

        elif key == pygame.K_r:
            self.game.restart()

        elif key in KEY_TO_DIRECTION:
            self.game.apply_move(KEY_TO_DIRECTION[key])

        return True

    def handle_click(self, pos):
        """mouse input, only the restart button reacts"""
        if self.restart_button.collidepoint(pos):
            self.game.restart()

    def run(self):
        """main loop"""
        logger.info("2048 game started")

        running = True
        while running:
            # KEYDOWN fires once per press, so one move per key edge
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self.handle_keypress(event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.handle_click(event.pos)

            self.draw_board()
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()


def main(size=SIZE):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )
    try:
        GameGUI(Game2048(size=size)).run()
    except pygame.error:
        logger.exception("error running game")
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
