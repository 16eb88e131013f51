import exemplary


def render_examples():
    exemplary.run(['README.md'], render=True)

if __name__ == '__main__':
    render_examples()
